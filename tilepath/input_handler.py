"""
Input handling abstraction to decouple Pygame input from the demo logic.
"""

from __future__ import annotations
import pygame
from typing import List, Tuple

Point = Tuple[int, int]


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    exposes the clicks and setting toggles that happened this frame.
    """

    def __init__(self) -> None:
        self._quit = False
        # Screen positions clicked this frame, in event order
        self._wall_clicks: List[Point] = []
        self._endpoint_clicks: List[Point] = []
        self._toggle_diagonal = False
        self._cycle_heuristic = False
        self._toggle_barriers = False
        self._toggle_borders = False
        self._clear = False

    def process_events(self) -> None:
        """
        Poll Pygame events and record quit requests, mouse clicks and
        setting toggles for this frame.
        """
        self._quit = False
        self._wall_clicks = []
        self._endpoint_clicks = []
        self._toggle_diagonal = False
        self._cycle_heuristic = False
        self._toggle_barriers = False
        self._toggle_borders = False
        self._clear = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_x):
                    self._quit = True
                elif event.key == pygame.K_g:
                    self._toggle_diagonal = True
                elif event.key == pygame.K_h:
                    self._cycle_heuristic = True
                elif event.key == pygame.K_b:
                    self._toggle_barriers = True
                elif event.key == pygame.K_c:
                    self._toggle_borders = True
                elif event.key == pygame.K_r:
                    self._clear = True
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._wall_clicks.append(tuple(event.pos))
                elif event.button == 3:
                    self._endpoint_clicks.append(tuple(event.pos))

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def wall_clicks(self) -> List[Point]:
        """Return positions left-clicked this frame (toggle a wall)."""
        return list(self._wall_clicks)

    def endpoint_clicks(self) -> List[Point]:
        """Return positions right-clicked this frame (place start or target)."""
        return list(self._endpoint_clicks)

    def toggle_diagonal_pressed(self) -> bool:
        return self._toggle_diagonal

    def cycle_heuristic_pressed(self) -> bool:
        return self._cycle_heuristic

    def toggle_barriers_pressed(self) -> bool:
        return self._toggle_barriers

    def toggle_borders_pressed(self) -> bool:
        return self._toggle_borders

    def clear_pressed(self) -> bool:
        """Return True if R was pressed this frame to remove all walls."""
        return self._clear
