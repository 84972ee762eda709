"""Plain game state shared by the client and the server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Entities:
    """Everything in the game world at one moment in time."""

    time_stamp: int = 0
    box_width: int = 200
    box_height: int = 50
    box_x: int = 0
    box_y: int = 0


@dataclass
class InputState:
    """The directional keys held by one player at one moment in time."""

    time_stamp: int = 0
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False