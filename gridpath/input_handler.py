"""
Input handling abstraction to decouple Pygame input from demo logic.
"""

from __future__ import annotations
import pygame
from typing import List, Tuple

# Cursor movement per arrow key, as (drow, dcol)
_ARROW_KEYS = {
    pygame.K_UP: (-1, 0),
    pygame.K_DOWN: (1, 0),
    pygame.K_LEFT: (0, -1),
    pygame.K_RIGHT: (0, 1),
}

# Single-key demo commands
_COMMAND_KEYS = {
    pygame.K_w: "add_wall",
    pygame.K_e: "erase_wall",
    pygame.K_SPACE: "find_path",
    pygame.K_c: "clear_path",
    pygame.K_r: "reset_walls",
    pygame.K_d: "toggle_diagonal",
    pygame.K_h: "cycle_heuristic",
    pygame.K_s: "toggle_smoothing",
    pygame.K_f: "toggle_follow",
}


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    provides cursor movement and command queries for the current frame.
    """

    def __init__(self) -> None:
        self._quit = False
        self._cursor_moves: List[Tuple[int, int]] = []
        self._commands: List[str] = []

    def process_events(self) -> None:
        """
        Poll Pygame events and record quit requests, cursor moves and
        commands triggered this frame.
        """
        self._quit = False
        self._cursor_moves = []
        self._commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key in _ARROW_KEYS:
                    self._cursor_moves.append(_ARROW_KEYS[event.key])
                elif event.key in _COMMAND_KEYS:
                    self._commands.append(_COMMAND_KEYS[event.key])

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def cursor_moves(self) -> List[Tuple[int, int]]:
        """Return (drow, dcol) cursor moves requested this frame, in order."""
        return list(self._cursor_moves)

    def commands(self) -> List[str]:
        """Return command names triggered this frame, in order."""
        return list(self._commands)
