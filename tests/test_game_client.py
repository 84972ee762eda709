import pygame
import pytest

from boxarena.game_client import HISTORY_LENGTH, GameClient
from boxarena.page import Navigator


class FakeClock:
    def __init__(self, start=1000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def surface():
    return pygame.Surface((800, 600))


def make_client(surface, clock=None, held=()):
    held_keys = set(held)
    return GameClient(
        Navigator(),
        surface,
        None,
        clock=clock or FakeClock(),
        key_state=lambda key: key in held_keys,
    )


def test_initial_state(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock)
    assert len(client.entities) == 1
    assert len(client.input_states) == 1
    assert client.input_states[0][0].time_stamp == 1000
    assert client.time_of_last_frame == 1000


def test_update_moves_box_left(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock, held={pygame.K_LEFT})
    clock.now = 1100
    assert client.update() is True
    assert client.entities[0].box_x == -10
    assert client.entities[0].box_y == 0
    assert client.entities[0].time_stamp == 1100


def test_update_without_keys_keeps_box(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock)
    clock.now = 1500
    client.update()
    assert (client.entities[0].box_x, client.entities[0].box_y) == (0, 0)


def test_update_queues_input_message(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock, held={pygame.K_LEFT})
    clock.now = 1100
    client.update()
    assert client.take_message() == "1100:0010"


def test_update_clears_stored_input_after_sending(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock, held={pygame.K_UP, pygame.K_RIGHT})
    clock.now = 1100
    client.update()
    stored = client.input_states[0][0]
    assert not (stored.up or stored.down or stored.left or stored.right)
    assert stored.time_stamp == 1100


def test_history_is_capped(surface):
    clock = FakeClock(0)
    client = make_client(surface, clock)
    for step in range(1, 31):
        clock.now = step * 10
        client.update()
    assert len(client.entities) == HISTORY_LENGTH
    assert len(client.input_states) == HISTORY_LENGTH
    stamps = [frame.time_stamp for frame in client.entities]
    assert stamps == sorted(stamps, reverse=True)


def test_history_frames_are_independent(surface):
    clock = FakeClock(0)
    client = make_client(surface, clock, held={pygame.K_DOWN})
    clock.now = 100
    client.update()
    assert client.entities[0] is not client.entities[1]
    assert client.entities[1].box_y == 0


def test_udp_applies_server_state_to_newer_frame(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock)
    clock.now = 1100
    client.update()
    client.udp_message_received("7,9", 1050)
    assert (client.entities[0].box_x, client.entities[0].box_y) == (7, 9)


def test_udp_older_than_nothing_is_ignored(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock)
    clock.now = 1100
    client.update()
    client.udp_message_received("7,9", 5000)
    assert all(
        (frame.box_x, frame.box_y) == (0, 0) for frame in client.entities
    )


def test_udp_malformed_number_raises(surface):
    clock = FakeClock(1000)
    client = make_client(surface, clock)
    clock.now = 1100
    client.update()
    with pytest.raises(ValueError):
        client.udp_message_received("a,b", 1050)


def test_draw_paints_box(surface):
    client = make_client(surface)
    assert client.draw() is True
    assert tuple(surface.get_at((5, 5)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((300, 300)))[:3] == (0, 0, 0)


def test_event_forwarding_keeps_running(surface):
    client = make_client(surface)
    results = [
        client.key_pressed(pygame.K_a),
        client.key_released(pygame.K_a),
        client.mouse_moved(1, 2),
        client.mouse_pressed(1, 1, 2),
        client.mouse_released(1, 1, 2),
        client.mouse_wheeled(1, 1, 2),
        client.text_entered(65),
        client.other_event(None),
        client.resized(640, 480),
    ]
    assert results == [True] * 9