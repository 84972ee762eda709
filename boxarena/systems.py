"""Game rules: input handling, simulation steps and wire encoding."""

from __future__ import annotations

from collections.abc import Sequence

from boxarena.model import Entities, InputState

_PIXELS_PER_MS_DIVISOR = 10


def _split(text: str, delimiter: str) -> list[str]:
    """Split like reading delimited fields from a stream: no trailing empty field."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def _step(delta_time: int) -> int:
    """Distance moved in ``delta_time`` milliseconds, truncated toward zero."""
    magnitude = abs(delta_time) // _PIXELS_PER_MS_DIVISOR
    return magnitude if delta_time >= 0 else -magnitude


class SystemsHandler:
    """Applies player input to the world and encodes state for the network.

    The event hooks keep track of the raw input they are given and always
    return True so that the application keeps running.
    """

    def __init__(self) -> None:
        self.held_keys: set = set()
        self.held_buttons: set = set()
        self.mouse_position: tuple[int, int] = (0, 0)
        self.wheel_total = 0
        self.typed: list[int] = []

    def setup_entities(self, entities: Entities) -> None:
        """Place the box at the origin for the start of a game."""
        entities.box_x = 0
        entities.box_y = 0

    def key_pressed(self, key) -> bool:
        self.held_keys.add(key)
        return True

    def key_released(self, key) -> bool:
        self.held_keys.discard(key)
        return True

    def mouse_moved(self, x: int, y: int) -> bool:
        self.mouse_position = (x, y)
        return True

    def mouse_pressed(self, button, x: int, y: int) -> bool:
        self.held_buttons.add(button)
        self.mouse_position = (x, y)
        return True

    def mouse_released(self, button, x: int, y: int) -> bool:
        self.held_buttons.discard(button)
        self.mouse_position = (x, y)
        return True

    def mouse_wheeled(self, delta: int, x: int, y: int) -> bool:
        self.wheel_total += delta
        self.mouse_position = (x, y)
        return True

    def text_entered(self, character: int) -> bool:
        self.typed.append(character)
        return True

    def other_event(self, event) -> bool:
        return True

    def closing(self) -> None:
        """Forget all tracked input when the application shuts down."""
        self.held_keys.clear()
        self.held_buttons.clear()
        self.typed.clear()

    def update(
        self,
        entities: Entities,
        input_states: Sequence[InputState],
        delta_time: int,
    ) -> bool:
        """Advance ``entities`` by ``delta_time`` ms under every player's input."""
        step = _step(delta_time)
        for state in input_states:
            if state.left:
                entities.box_x -= step
            if state.right:
                entities.box_x += step
            if state.up:
                entities.box_y -= step
            if state.down:
                entities.box_y += step
        return True

    def entities_to_string(self, entities: Entities, ip) -> str:
        """Encode the world as ``"x,y"`` for the player at ``ip``."""
        return f"{entities.box_x},{entities.box_y}"

    def entities_from_string(self, entities: Entities, text: str) -> None:
        """Load box position from ``"x,y"``; other shapes are ignored.

        Raises ValueError if a field is not a number.
        """
        fields = _split(text, ",")
        if len(fields) != 2:
            return
        entities.box_x = int(float(fields[0]))
        entities.box_y = int(float(fields[1]))

    def input_state_to_string(self, state: InputState) -> str:
        """Encode input as ``"<time>:<up><down><left><right>"`` with 0/1 flags."""
        flags = "".join(
            str(int(flag)) for flag in (state.up, state.down, state.left, state.right)
        )
        return f"{state.time_stamp}:{flags}"

    def apply_input_state(self, state: InputState, text: str) -> None:
        """Decode the output of :meth:`input_state_to_string` into ``state``.

        Messages without exactly one ``:`` are ignored; flags are read only
        when there are exactly four. Raises ValueError for a bad time stamp.
        """
        fields = _split(text, ":")
        if len(fields) != 2:
            return
        stamp, flags = fields
        state.time_stamp = int(stamp)
        if len(flags) == 4:
            state.up, state.down, state.left, state.right = (c == "1" for c in flags)

    def clear_input_state(self, state: InputState, time: int) -> None:
        """Release every key and stamp ``state`` with ``time``."""
        state.time_stamp = time
        state.up = state.down = state.left = state.right = False