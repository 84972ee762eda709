"""Authoritative game simulation run by the hosting machine."""

from __future__ import annotations

import copy
import time
from collections import deque
from collections.abc import Callable, Iterable

from boxarena.model import Entities, InputState
from boxarena.systems import SystemsHandler

HISTORY_LENGTH = 20


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class GameServer:
    """Keeps a short history of world states and rewinds it on late input.

    Outgoing messages are queued in ``udp_outbox`` and ``tcp_outbox`` as
    ``(message, ip)`` pairs for the network layer to send and clear.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _now_ms
        self.systems = SystemsHandler()
        self.players: list = []
        self.entities: deque[Entities] = deque()
        self.input_states: deque[list[InputState]] = deque()
        self.udp_outbox: list[tuple[str, object]] = []
        self.tcp_outbox: list[tuple[str, object]] = []
        self.last_tcp: dict[object, tuple[str, int]] = {}
        self.time_of_last_frame = 0

    def start(self, players: Iterable) -> None:
        """Begin a game with the given player addresses."""
        self.players = list(players)
        now = self._clock()
        states = []
        for _ in self.players:
            state = InputState()
            self.systems.clear_input_state(state, now)
            states.append(state)
        self.input_states = deque([states])
        self.entities = deque([Entities()])
        self.systems.setup_entities(self.entities[0])
        self.time_of_last_frame = self._clock()

    def update(self) -> None:
        """Simulate one frame and queue the world state for every player."""
        if not self.entities:
            raise RuntimeError("game has not been started")
        self.entities.appendleft(copy.copy(self.entities[0]))
        self.input_states.appendleft([InputState() for _ in self.players])
        if len(self.entities) > HISTORY_LENGTH:
            self.entities.pop()
            self.input_states.pop()
        now = self._clock()
        delta_time = now - self.time_of_last_frame
        self.time_of_last_frame = now
        front = self.entities[0]
        front.time_stamp = now
        self.systems.update(front, self.input_states[0], delta_time)
        for player in self.players:
            self.udp_outbox.append(
                (self.systems.entities_to_string(front, player), player)
            )

    def received_tcp(self, message: str, ip, time_stamp: int) -> None:
        """Remember the latest reliable message from each player.

        Reliable messages do not affect the simulation.
        """
        if ip in self.players:
            self.last_tcp[ip] = (message, time_stamp)

    def received_udp(self, message: str, ip, time_stamp: int) -> None:
        """Apply a player's input and replay the frames it arrived late for."""
        for index, player in enumerate(self.players):
            if ip != player:
                continue
            new_info = InputState()
            self.systems.apply_input_state(new_info, message)
            for j, frame in enumerate(self.entities):
                if new_info.time_stamp > frame.time_stamp:
                    if j + 1 < len(self.entities):
                        self._replay(j, index, new_info)
                    break

    def _replay(self, newest_stale: int, player_index: int, info: InputState) -> None:
        for k in range(newest_stale, -1, -1):
            self.input_states[k][player_index] = copy.copy(info)
            older = self.entities[k + 1]
            frame = copy.copy(older)
            frame.time_stamp = self.entities[k].time_stamp
            self.entities[k] = frame
            self.systems.update(
                frame, self.input_states[k], frame.time_stamp - older.time_stamp
            )