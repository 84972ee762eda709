"""Base screen of the menu system and the shared current-page pointer."""

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Navigator:
    """Holds the index of the page currently on screen, shared by all pages."""

    current: int = 0


class Page:
    """A screen that handles events and passes text messages to the client.

    Every event handler returns ``keep_running``, which stays True unless a
    page decides the application should quit.
    """

    def __init__(self, navigator: Navigator, surface: pygame.Surface, font) -> None:
        self.navigator = navigator
        self.surface = surface
        self.font = font
        self.connection_stage = 0
        self.keep_running = True
        self.closed = False
        self.last_tcp_message: tuple[str, int] | None = None
        self.last_udp_message: tuple[str, int] | None = None
        self._message_for_client = ""

    def key_pressed(self, key) -> bool:
        return self.keep_running

    def key_released(self, key) -> bool:
        return self.keep_running

    def mouse_moved(self, x: int, y: int) -> bool:
        return self.keep_running

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return self.keep_running

    def mouse_released(self, button, x: int, y: int) -> bool:
        return self.keep_running

    def mouse_wheeled(self, delta: int, x: int, y: int) -> bool:
        return self.keep_running

    def resized(self, width: int, height: int) -> bool:
        return self.keep_running

    def text_entered(self, character: int) -> bool:
        return self.keep_running

    def other_event(self, event) -> bool:
        return self.keep_running

    def closing(self) -> None:
        """Mark the page as closed when the application shuts down."""
        self.closed = True

    def draw(self) -> bool:
        return self.keep_running

    def update(self) -> bool:
        return self.keep_running

    def tcp_message_received(self, message: str, time_stamp: int) -> None:
        """Remember the latest reliable message from the server."""
        self.last_tcp_message = (message, time_stamp)

    def udp_message_received(self, message: str, time_stamp: int) -> None:
        """Remember the latest unreliable message from the server."""
        self.last_udp_message = (message, time_stamp)

    def send_message_to_client(self, text: str) -> None:
        """Queue ``text`` for the client; queued texts are concatenated."""
        self._message_for_client += text

    def take_message(self) -> str:
        """Return everything queued for the client and clear the queue."""
        message, self._message_for_client = self._message_for_client, ""
        return message