
"""Gravity timer: elapsed ms in, at most one drop tick out"""

BASE_INTERVAL_MS = 900
STEP_MS = 70
MIN_INTERVAL_MS = 90

def drop_interval_ms(level: int) -> int:
    return max(MIN_INTERVAL_MS, BASE_INTERVAL_MS - (level - 1) * STEP_MS)

class DropScheduler:
    def __init__(self):
        self.acc = 0.0

    def reset(self):
        self.acc = 0.0

    def update(self, dt_ms, level) -> bool:
        # overshoot within one frame is dropped, not carried
        self.acc += dt_ms
        if self.acc >= drop_interval_ms(level):
            self.acc = 0.0
            return True
        return False
