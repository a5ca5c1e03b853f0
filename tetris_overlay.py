
"""Status overlay: message over the board whenever the game is not running"""
from typing import Optional
import pygame
from tetris_game import Status

MESSAGES = {
    Status.IDLE: ("Press Start", "Enter to play"),
    Status.PAUSED: ("Paused", "P to resume"),
    Status.GAME_OVER: ("Game Over", "R to restart"),
}

def overlay_text(status: Status) -> Optional[str]:
    m = MESSAGES.get(status)
    return m[0] if m else None

class Overlay:
    def __init__(self, big_font, font):
        self.big_font = big_font
        self.font = font

    def draw(self, screen, status: Status, rect: pygame.Rect):
        title = overlay_text(status)
        if title is None: return
        hint = MESSAGES[status][1]
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill((7,19,33,190))
        screen.blit(s, rect.topleft)
        t = self.big_font.render(title, True, (230,240,255))
        screen.blit(t, t.get_rect(center=(rect.centerx, rect.centery - 14)))
        h = self.font.render(hint, True, (200,210,235))
        screen.blit(h, h.get_rect(center=(rect.centerx, rect.centery + 20)))
