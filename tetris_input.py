
"""Keyboard bindings to game action names"""
from typing import Optional
import pygame

KEYMAP = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "drop",
    pygame.K_p: "pause",
    pygame.K_r: "restart",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
}

def action_for_key(key) -> Optional[str]:
    return KEYMAP.get(key)
