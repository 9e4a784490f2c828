"""Key bindings: pygame keys to engine commands"""
from typing import Dict, Optional
import pygame

KEY_COMMANDS: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "rotate_cw",
    pygame.K_z: "rotate_ccw",
    pygame.K_DOWN: "soft_drop",
    pygame.K_SPACE: "hard_drop",
}

def command_for(event) -> Optional[str]:
    if event.type != pygame.KEYDOWN: return None
    return KEY_COMMANDS.get(event.key)
