"""The menu screens: home, multiplayer choice, hosting, joining and matchmaking."""

from __future__ import annotations

import socket
from enum import IntEnum

import pygame

from boxarena.page import Page
from boxarena.widgets import Button, IpTextBox, PortTextBox

LABEL_SIZE = 30
LABEL_COLOR = pygame.Color(255, 255, 255)


class PageIndex(IntEnum):
    """Position of each screen in the client's page list."""

    HOME = 0
    MULTIPLAYER = 1
    SERVER = 2
    CLIENT = 3
    MATCHMAKING = 4
    GAME = 5


def _local_address() -> str:
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        return "127.0.0.1"


def _press_all(widgets, button, x: int, y: int) -> bool:
    for widget in widgets:
        widget.mouse_pressed(button, x, y)
    return True


def _draw_all(widgets) -> bool:
    for widget in widgets:
        widget.draw()
    return True


def _blit_label(surface, face, text: str, position) -> None:
    left, top = position
    surface.blit(face.render(text, True, LABEL_COLOR), (int(left), int(top)))


class HomePage(Page):
    """The title screen with a single button leading to multiplayer."""

    def __init__(self, navigator, surface, font) -> None:
        super().__init__(navigator, surface, font)
        self.multiplayer_button = Button(
            surface, font, "Multiplayer", 100, 100, 200, 50
        )

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return _press_all((self.multiplayer_button,), button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        if self.multiplayer_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.MULTIPLAYER
        return True

    def draw(self) -> bool:
        return _draw_all((self.multiplayer_button,))


class MultiplayerPage(Page):
    """Lets the player choose between hosting a game and joining one."""

    def __init__(self, navigator, surface, font) -> None:
        super().__init__(navigator, surface, font)
        self.back_button = Button(surface, font, "Back", 0, 0, 200, 50)
        self.server_button = Button(surface, font, "Server", 100, 100, 200, 50)
        self.client_button = Button(surface, font, "Client", 100, 200, 200, 50)
        self._widgets = (self.back_button, self.server_button, self.client_button)

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return _press_all(self._widgets, button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        if self.back_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.HOME
        if self.server_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.SERVER
            self.send_message_to_client("loginToOwnServer")
        if self.client_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.CLIENT
        return True

    def draw(self) -> bool:
        return _draw_all(self._widgets)


class ServerPage(Page):
    """Shows the address players should join and starts the hosted game."""

    def __init__(self, navigator, surface, font, port: int, local_address=None) -> None:
        super().__init__(navigator, surface, font)
        self.back_button = Button(surface, font, "Back", 0, 0, 200, 50)
        self.start_button = Button(surface, font, "Start", 0, 0, 200, 50)
        self.server_port = port
        self.port_label = str(port)
        self.ip_label = local_address if local_address is not None else _local_address()
        self._label_face = pygame.font.Font(font, LABEL_SIZE)
        self.port_label_position = (0.0, 0.0)
        self.ip_label_position = (0.0, 0.0)

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return _press_all((self.back_button, self.start_button), button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        if self.back_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.MULTIPLAYER
            self.send_message_to_client("logoutOfOwnServer")
        if self.start_button.mouse_released(button, x, y):
            self.send_message_to_client("startGame")
            self.navigator.current = PageIndex.GAME
        return True

    def _centred(self, text: str, centre_x: int, centre_y: int, offset: int):
        text_width, text_height = self._label_face.size(text)
        return (centre_x - text_width / 2, centre_y - text_height / 2 + offset)

    def draw(self) -> bool:
        """Lay the start button and labels out around the window centre and draw."""
        width, height = self.surface.get_size()
        centre_x, centre_y = width // 2, height // 2

        self.start_button.set_bounds(centre_x - 100, centre_y + 55, 200, 50)
        self.port_label_position = self._centred(self.port_label, centre_x, centre_y, -20)
        self.ip_label_position = self._centred(self.ip_label, centre_x, centre_y, 20)

        _draw_all((self.back_button, self.start_button))
        for text, position in (
            (self.port_label, self.port_label_position),
            (self.ip_label, self.ip_label_position),
        ):
            _blit_label(self.surface, self._label_face, text, position)
        return True


class ClientPage(Page):
    """A form for the address and port of a server to join."""

    def __init__(self, navigator, surface, font) -> None:
        super().__init__(navigator, surface, font)
        self.back_button = Button(surface, font, "Back", 0, 0, 200, 50)
        self.connect_button = Button(surface, font, "Connect", 100, 200, 200, 50)
        self.ip_text_box = IpTextBox(surface, font, "", 100, 300, 200, 50)
        self.port_text_box = PortTextBox(surface, font, "", 100, 400, 200, 50)
        self._widgets = (
            self.back_button,
            self.connect_button,
            self.ip_text_box,
            self.port_text_box,
        )
        self._label_face = pygame.font.Font(font, LABEL_SIZE)
        self.connection_stage_label_position = (100, 500)

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return _press_all(self._widgets, button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        if self.back_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.MULTIPLAYER
        if self.connect_button.mouse_released(button, x, y):
            self._submit_form()
        return True

    def text_entered(self, character: int) -> bool:
        if self.ip_text_box.text_entered(character) or self.port_text_box.text_entered(
            character
        ):
            self._submit_form()
        return True

    def update(self) -> bool:
        if self.connection_stage == 3:
            self.navigator.current = PageIndex.MATCHMAKING
        return True

    def draw(self) -> bool:
        _draw_all(self._widgets)
        _blit_label(
            self.surface,
            self._label_face,
            str(self.connection_stage),
            self.connection_stage_label_position,
        )
        return True

    def _submit_form(self) -> None:
        self.send_message_to_client(
            f"{self.ip_text_box.text}:{self.port_text_box.text}"
        )


class ClientMatchmakingPage(Page):
    """Shown while a joined player waits for the host to start the game."""

    def __init__(self, navigator, surface, font) -> None:
        super().__init__(navigator, surface, font)
        self.back_button = Button(surface, font, "Log Out", 0, 0, 200, 50)

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        return _press_all((self.back_button,), button, x, y)

    def mouse_released(self, button, x: int, y: int) -> bool:
        if self.back_button.mouse_released(button, x, y):
            self.navigator.current = PageIndex.MULTIPLAYER
            self.send_message_to_client("logout")
        return True

    def draw(self) -> bool:
        return _draw_all((self.back_button,))