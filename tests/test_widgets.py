import pygame
import pytest

from boxarena.widgets import (
    BACKSPACE,
    BUTTON_ACTIVE_FILL_COLOR,
    BUTTON_FILL_COLOR,
    NEWLINE,
    TEXTBOX_OUTLINE_COLOR,
    Button,
    IpTextBox,
    PortTextBox,
    TextBox,
)

BACKGROUND = pygame.Color(0, 0, 0)


@pytest.fixture(autouse=True)
def _fonts():
    pygame.font.init()
    yield


@pytest.fixture
def surface():
    canvas = pygame.Surface((400, 300))
    canvas.fill(BACKGROUND)
    return canvas


def type_text(box, text):
    return [box.text_entered(ord(c)) for c in text]


def make_box(cls, surface, label="", focus=True):
    box = cls(surface, None, label, 0, 0, 200, 50)
    if focus:
        box.mouse_pressed(1, 10, 10)
    return box


@pytest.fixture
def button(surface):
    return Button(surface, None, "Go", 100, 100, 200, 50)


def test_button_click_inside(button):
    button.mouse_pressed(1, 150, 120)
    assert button.mouse_released(1, 160, 130) is True


def test_button_release_outside_is_not_click(button):
    button.mouse_pressed(1, 150, 120)
    assert button.mouse_released(1, 10, 10) is False
    assert button.pressed is False


def test_button_release_without_press(button):
    assert button.mouse_released(1, 150, 120) is False


@pytest.mark.parametrize("x", [100, 300])
def test_button_edges_are_outside(button, x):
    button.mouse_pressed(1, x, 120)
    assert button.pressed is False


def test_button_draw_colors_and_reset(surface, button):
    corner = (102, 148)
    button.draw()
    assert surface.get_at(corner) == BUTTON_FILL_COLOR
    button.mouse_pressed(1, 150, 120)
    button.mouse_released(1, 150, 120)
    button.draw()
    assert surface.get_at(corner) == BUTTON_ACTIVE_FILL_COLOR
    assert button.clicked_this_frame is False
    button.draw()
    assert surface.get_at(corner) == BUTTON_FILL_COLOR


def test_button_set_bounds_moves_hit_area(button):
    button.set_bounds(0, 0, 50, 50)
    button.mouse_pressed(1, 150, 120)
    assert button.pressed is False
    button.mouse_pressed(1, 25, 25)
    assert button.mouse_released(1, 25, 25) is True


@pytest.mark.parametrize("cls", [TextBox, IpTextBox, PortTextBox])
def test_boxes_ignore_input_without_focus(surface, cls):
    box = make_box(cls, surface, "12", focus=False)
    assert box.text_entered(ord("3")) is False
    assert box.text_entered(NEWLINE) is False
    assert box.text == "12"


@pytest.mark.parametrize(
    "cls, typed, expected",
    [
        (TextBox, "hi!", "hi!"),
        (IpTextBox, "1234", "123"),
        (IpTextBox, "1.2.3.4.5", "1.2.3.45"),
        (IpTextBox, "192.168.0.1", "192.168.0.1"),
        (IpTextBox, "a1b", "1"),
        (PortTextBox, "1234567", "12345"),
        (PortTextBox, "8x0.8", "808"),
    ],
)
def test_typing_filters(surface, cls, typed, expected):
    box = make_box(cls, surface)
    results = type_text(box, typed)
    assert box.text == expected
    assert results == [False] * len(typed)


@pytest.mark.parametrize(
    "cls, label, expected",
    [
        (TextBox, "hi", "h"),
        (TextBox, "", ""),
        (PortTextBox, "808", "80"),
    ],
)
def test_backspace(surface, cls, label, expected):
    box = make_box(cls, surface, label)
    box.text_entered(BACKSPACE)
    assert box.text == expected


@pytest.mark.parametrize("cls", [TextBox, IpTextBox])
def test_enter_submits(surface, cls):
    box = make_box(cls, surface, "1")
    assert box.text_entered(NEWLINE) is True
    assert box.text == "1"


def test_textbox_click_elsewhere_loses_focus(surface):
    box = TextBox(surface, None, "", 0, 0, 200, 50)
    box.mouse_pressed(1, 10, 10)
    assert box.focused is True
    box.mouse_pressed(1, 300, 200)
    assert box.focused is False
    assert box.text_entered(ord("a")) is False
    assert box.text == ""


def test_textbox_outline_only_when_focused(surface):
    box = TextBox(surface, None, "", 100, 100, 200, 50)
    box.draw()
    assert surface.get_at((99, 125)) == BACKGROUND
    box.mouse_pressed(1, 150, 120)
    box.draw()
    assert surface.get_at((99, 125)) == TEXTBOX_OUTLINE_COLOR