from __future__ import annotations
import logging
import pygame
from typing import List, Optional

from .agent import Agent
from .config import (
    CURSOR_START,
    FOLLOW_STEP_INTERVAL,
    FPS,
    PLAYER_START,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .heuristics import Heuristic
from .input_handler import InputHandler
from .options import PathfindingOptions
from .point import Coord, in_bounds
from .renderer import Renderer
from .smoothing import smooth_path
from .world import World

logger = logging.getLogger(__name__)


class PathfindingDemo:
    """Interactive A* demo: handles initialization, loop, and commands."""

    HEURISTICS = [
        Heuristic.MANHATTAN,
        Heuristic.EUCLIDEAN,
        Heuristic.CHEBYSHEV,
        Heuristic.OCTILE,
    ]

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        world: Optional[World] = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.OPENGL | pygame.DOUBLEBUF
        )
        pygame.display.set_caption("A* Pathfinding Demo")
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.world = world or World()
        self.player = Agent(*PLAYER_START)
        self.world.add_entity(self.player)
        self.cursor: Coord = CURSOR_START
        self.heuristic_index = 0
        self.allow_diagonal = False
        self.smoothing = False
        self.following = False
        # Seconds accumulated towards the next follow step
        self._follow_timer = 0.0
        self.renderer = Renderer(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.input = InputHandler()
        self.running = True

    @property
    def heuristic(self) -> Heuristic:
        return self.HEURISTICS[self.heuristic_index]

    @property
    def path(self) -> List[Coord]:
        return self.player.path

    def options(self) -> PathfindingOptions:
        return PathfindingOptions(
            allow_diagonal=self.allow_diagonal,
            heuristic=self.heuristic,
            is_walkable=self.world.is_walkable,
        )

    def handle_events(self) -> None:
        """Process input events via InputHandler and dispatch commands."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        for drow, dcol in self.input.cursor_moves():
            self.move_cursor(drow, dcol)
        for command in self.input.commands():
            self.apply_command(command)

    def apply_command(self, command: str) -> None:
        handler = getattr(self, command, None)
        if handler is None:
            logger.warning("Unknown command %r", command)
            return
        handler()

    def move_cursor(self, drow: int, dcol: int) -> None:
        """Move the cursor by one cell, staying inside the grid."""
        cell = (self.cursor[0] + drow, self.cursor[1] + dcol)
        if in_bounds(cell, self.world.width, self.world.height):
            self.cursor = cell

    def add_wall(self) -> None:
        """Put a wall under the cursor unless the player stands there."""
        row, col = self.cursor
        if (row, col) == self.player.position():
            return
        self.world.add_wall(row, col)

    def erase_wall(self) -> None:
        self.world.remove_wall(*self.cursor)

    def find_path(self) -> None:
        """Plan a path from the player to the cursor."""
        path = self.player.find_path(self.world, self.cursor, self.options())
        self.player.set_path(path)
        if path is None:
            logger.info("No path from %s to %s", self.player.position(), self.cursor)
            self.following = False

    def clear_path(self) -> None:
        self.player.set_path(None)
        self.following = False

    def reset_walls(self) -> None:
        self.world.reset_walls()
        self.clear_path()

    def toggle_diagonal(self) -> None:
        self.allow_diagonal = not self.allow_diagonal
        if self.path:
            self.find_path()

    def cycle_heuristic(self) -> None:
        self.heuristic_index = (self.heuristic_index + 1) % len(self.HEURISTICS)
        if self.path:
            self.find_path()

    def toggle_smoothing(self) -> None:
        self.smoothing = not self.smoothing

    def toggle_follow(self) -> None:
        self.following = not self.following and bool(self.path)
        self._follow_timer = 0.0

    def display_path(self) -> List[Coord]:
        """Path as drawn: smoothed waypoints when smoothing is on."""
        if self.smoothing:
            return smooth_path(self.path, self.world.is_walkable)
        return list(self.path)

    def status_text(self) -> str:
        length = len(self.path)
        path_status = f"Path: {length} steps" if length else "No path (press Space)"
        diagonal = "ON" if self.allow_diagonal else "OFF"
        smooth = "ON" if self.smoothing else "OFF"
        return (
            f"{path_status} | Heuristic: {self.heuristic.value} | "
            f"Diagonal: {diagonal} | Smooth: {smooth}"
        )

    def update(self, dt: float) -> None:
        """Advance the player along its path while following is enabled."""
        if not self.following:
            return
        self._follow_timer += dt
        while self.following and self._follow_timer >= FOLLOW_STEP_INTERVAL:
            self._follow_timer -= FOLLOW_STEP_INTERVAL
            if not self.player.step(self.world):
                self.following = False

    def render(self) -> None:
        self.renderer.render(
            self.world, self.player, self.cursor, self.display_path(), self.status_text()
        )

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render()
        self.renderer.shutdown()
        pygame.quit()
