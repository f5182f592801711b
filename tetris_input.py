
"""Keyboard -> engine command mapping"""
import pygame

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_r: "reset",
}

def command_for(e):
    if e.type != pygame.KEYDOWN: return None
    return KEYMAP.get(e.key)

def dispatch(engine, e) -> bool:
    """Run the command bound to a key event. True if a command was issued."""
    name = command_for(e)
    if name is None: return False
    if engine.game_over and name != "reset": return False
    getattr(engine, name)()
    return True
