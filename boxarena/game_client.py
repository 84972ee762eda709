"""The in-game screen: local prediction and reconciliation with the server."""

from __future__ import annotations

import copy
import time
from collections import deque
from collections.abc import Callable

import pygame

from boxarena.model import Entities, InputState
from boxarena.page import Navigator, Page
from boxarena.systems import SystemsHandler
from boxarena.view import View

HISTORY_LENGTH = 20


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _pygame_key_state(key: int) -> bool:
    return bool(pygame.key.get_pressed()[key])


class GameClient(Page):
    """Runs the game locally, sends input to the server and applies its state.

    Events are handled first in a frame, then :meth:`update`, then :meth:`draw`.
    """

    def __init__(
        self,
        navigator: Navigator,
        surface: pygame.Surface,
        font: str | None,
        clock: Callable[[], int] | None = None,
        key_state: Callable[[int], bool] | None = None,
    ) -> None:
        super().__init__(navigator, surface, font)
        self._clock = clock or _now_ms
        self._key_state = key_state or _pygame_key_state
        self.view = View(surface)
        self.systems = SystemsHandler()

        self.current_input_state = InputState()
        self.systems.clear_input_state(self.current_input_state, self._clock())
        self.input_states: deque[list[InputState]] = deque(
            [[copy.copy(self.current_input_state)]]
        )
        self.entities: deque[Entities] = deque([Entities()])
        self.systems.setup_entities(self.entities[0])
        self.time_of_last_frame = self._clock()

    def key_pressed(self, key) -> bool:
        return self.systems.key_pressed(key)

    def key_released(self, key) -> bool:
        return self.systems.key_released(key)

    def mouse_moved(self, x: int, y: int) -> bool:
        return self.systems.mouse_moved(x, y)

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return self.systems.mouse_pressed(button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        return self.systems.mouse_released(button, x, y)

    def mouse_wheeled(self, delta: int, x: int, y: int) -> bool:
        return self.systems.mouse_wheeled(delta, x, y)

    def text_entered(self, character: int) -> bool:
        return self.systems.text_entered(character)

    def other_event(self, event) -> bool:
        return self.systems.other_event(event)

    def closing(self) -> None:
        self.systems.closing()

    def update(self) -> bool:
        """Record this frame's input, simulate one step and queue the input."""
        state = self.current_input_state
        state.left = self._key_state(pygame.K_LEFT)
        state.right = self._key_state(pygame.K_RIGHT)
        state.up = self._key_state(pygame.K_UP)
        state.down = self._key_state(pygame.K_DOWN)

        self.entities.appendleft(copy.copy(self.entities[0]))
        self.input_states.appendleft([copy.copy(state)])
        if len(self.entities) > HISTORY_LENGTH:
            self.entities.pop()
            self.input_states.pop()

        now = self._clock()
        delta_time = now - self.time_of_last_frame
        self.time_of_last_frame = now
        front = self.entities[0]
        front.time_stamp = now
        frame_input = self.input_states[0][0]
        frame_input.time_stamp = now

        keep_running = self.systems.update(front, self.input_states[0], delta_time)
        self.send_message_to_client(self.systems.input_state_to_string(frame_input))
        self.systems.clear_input_state(frame_input, now)
        return keep_running

    def tcp_message_received(self, message: str, time_stamp: int) -> None:
        """Reliable messages carry nothing for the game yet."""

    def udp_message_received(self, message: str, time_stamp: int) -> None:
        """Load the server's world state into the first frame newer than it."""
        for index, frame in enumerate(self.entities):
            if frame.time_stamp > time_stamp:
                self.systems.entities_from_string(frame, message)
                if index + 1 < len(self.entities):
                    self._replay(index)
                break

    def _replay(self, newest_stale: int) -> None:
        for j in range(newest_stale, 0, -1):
            older = self.entities[j + 1]
            frame = copy.copy(older)
            frame.time_stamp = self.entities[j].time_stamp
            self.entities[j] = frame
            self.systems.update(
                older, self.input_states[j], frame.time_stamp - older.time_stamp
            )

    def resized(self, width: int, height: int) -> bool:
        return self.view.resized(width, height)

    def draw(self) -> bool:
        return self.view.draw(self.entities[0])