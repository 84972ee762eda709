"""Clickable buttons and single-line text boxes drawn with pygame."""

from __future__ import annotations

import pygame

BUTTON_TEXT_COLOR = pygame.Color(255, 0, 0)
BUTTON_FILL_COLOR = pygame.Color(0, 255, 0)
BUTTON_ACTIVE_TEXT_COLOR = pygame.Color(0, 255, 0)
BUTTON_ACTIVE_FILL_COLOR = pygame.Color(255, 0, 0)

TEXTBOX_TEXT_COLOR = pygame.Color(0, 0, 0)
TEXTBOX_FILL_COLOR = pygame.Color(255, 255, 255)
TEXTBOX_OUTLINE_COLOR = pygame.Color(0, 0, 255)
TEXTBOX_OUTLINE_THICKNESS = 2

NEWLINE = 10
BACKSPACE = 8
_PERIOD = "."
_MAX_IP_PERIODS = 3
_MAX_IP_OCTET_DIGITS = 3
_MAX_PORT_DIGITS = 5

Bounds = tuple[float, float, float, float]


def _sized_font(font: str | None, height: float) -> pygame.font.Font:
    """Load ``font`` (a file path, or None for the default face) at half the height."""
    return pygame.font.Font(font, max(1, int(height / 2)))


def _contains(bounds: Bounds, x: float, y: float) -> bool:
    """True if ``(x, y)`` lies strictly inside ``bounds``."""
    left, top, width, height = bounds
    return left < x < left + width and top < y < top + height


def _to_rect(bounds: Bounds) -> pygame.Rect:
    left, top, width, height = bounds
    return pygame.Rect(int(left), int(top), int(width), int(height))


def _is_digit(character: int) -> bool:
    return ord("0") <= character <= ord("9")


class Button:
    """A labelled rectangle that reports a click when pressed and released inside it."""

    def __init__(
        self,
        surface: pygame.Surface,
        font: str | None,
        label: str,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        self.surface = surface
        self.font = font
        self.label = label
        self.pressed = False
        self.clicked_this_frame = False
        self.set_bounds(x, y, width, height)

    def set_bounds(self, x: float, y: float, w: float, h: float) -> None:
        """Move and resize the button, centring its label."""
        self.bounds: Bounds = (x, y, w, h)
        self._face = _sized_font(self.font, h)
        text_width, text_height = self._face.size(self.label)
        self.text_position = (x + w / 2 - text_width / 2, y + h / 3 - text_height / 2)

    def mouse_pressed(self, button, x: int, y: int) -> None:
        if _contains(self.bounds, x, y):
            self.pressed = True

    def mouse_released(self, button, x: int, y: int) -> bool:
        """Return True if this release completes a click on the button."""
        if self.pressed and _contains(self.bounds, x, y):
            self.pressed = False
            self.clicked_this_frame = True
            return True
        self.pressed = False
        return False

    def draw(self) -> None:
        if self.pressed or self.clicked_this_frame:
            text_color, fill_color = BUTTON_ACTIVE_TEXT_COLOR, BUTTON_ACTIVE_FILL_COLOR
        else:
            text_color, fill_color = BUTTON_TEXT_COLOR, BUTTON_FILL_COLOR
        pygame.draw.rect(self.surface, fill_color, _to_rect(self.bounds))
        if self.label:
            rendered = self._face.render(self.label, True, text_color)
            left, top = self.text_position
            self.surface.blit(rendered, (int(left), int(top)))
        self.clicked_this_frame = False


class TextBox:
    """A single-line editable field that takes typed characters while focused."""

    def __init__(
        self,
        surface: pygame.Surface,
        font: str | None,
        label: str,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        self.surface = surface
        self.font = font
        self.text = label
        self.focused = False
        self.set_bounds(x, y, width, height)

    def set_bounds(self, x: float, y: float, w: float, h: float) -> None:
        """Move and resize the box; the text is placed from its current width."""
        self.bounds: Bounds = (x, y, w, h)
        self._face = _sized_font(self.font, h)
        text_width, text_height = self._face.size(self.text)
        self.text_position = (x - text_width / 2 + 2, y + h / 3 - text_height / 2)

    def mouse_pressed(self, button, x: int, y: int) -> None:
        """Take focus when clicked inside, lose it when clicked elsewhere."""
        self.focused = _contains(self.bounds, x, y)

    def _accepts(self, character: int) -> bool:
        return True

    def text_entered(self, character: int) -> bool:
        """Handle one typed code point; return True when Enter submits the field."""
        if not self.focused:
            return False
        if character == NEWLINE:
            return True
        if character == BACKSPACE:
            self.text = self.text[:-1]
        elif self._accepts(character):
            self.text += chr(character)
        return False

    def draw(self) -> None:
        rect = _to_rect(self.bounds)
        if self.focused:
            outline = rect.inflate(
                2 * TEXTBOX_OUTLINE_THICKNESS, 2 * TEXTBOX_OUTLINE_THICKNESS
            )
            pygame.draw.rect(self.surface, TEXTBOX_OUTLINE_COLOR, outline)
        pygame.draw.rect(self.surface, TEXTBOX_FILL_COLOR, rect)
        if self.text:
            rendered = self._face.render(self.text, True, TEXTBOX_TEXT_COLOR)
            left, top = self.text_position
            self.surface.blit(rendered, (int(left), int(top)))


class IpTextBox(TextBox):
    """A text box that only builds dotted IPv4 addresses."""

    def _accepts(self, character: int) -> bool:
        if character == ord(_PERIOD):
            return self.text.count(_PERIOD) < _MAX_IP_PERIODS
        if _is_digit(character):
            octet_digits = len(self.text) - (self.text.rfind(_PERIOD) + 1)
            return octet_digits < _MAX_IP_OCTET_DIGITS
        return False

    def text_entered(self, character: int) -> bool:
        """Accept digits (three per octet) and up to three periods."""
        return super().text_entered(character)


class PortTextBox(TextBox):
    """A text box that only builds port numbers of up to five digits."""

    def _accepts(self, character: int) -> bool:
        return _is_digit(character) and len(self.text) < _MAX_PORT_DIGITS

    def text_entered(self, character: int) -> bool:
        """Accept digits while the port has fewer than five."""
        return super().text_entered(character)