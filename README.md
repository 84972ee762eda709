# boxarena

Building blocks for a small multiplayer arcade game on pygame. Players steer
a shared box around the screen with the arrow keys. The package holds the game
rules, the wire format for state and input, a server-side simulation and a
client-side game page that both keep a short history of frames and replay it
when late information arrives, and the menu screens and widgets that lead into
a game.

## Installation

```
pip install boxarena
```

To run the test suite:

```
pip install "boxarena[test]"
pytest
```

## Modules

- `boxarena.model`: dataclasses `Entities` (`time_stamp`, `box_x`, `box_y`,
  `box_width` = 200, `box_height` = 50) and `InputState` (`time_stamp`, `up`,
  `down`, `left`, `right`).
- `boxarena.systems`: `SystemsHandler`, the game rules.
  - `update(entities, input_states, delta_time)` moves the box, for each
    input state, by `delta_time // 10` pixels (truncated toward zero) in every
    held direction.
  - `entities_to_string` / `entities_from_string` use `"x,y"`. Text that does
    not split into two fields is ignored; fields are read as numbers and
    truncated to integers, and a non-number raises `ValueError`.
  - `input_state_to_string` / `apply_input_state` use
    `"<time_stamp>:<up><down><left><right>"` with each flag `0` or `1`.
    Text that does not split into two fields is ignored, the flags are read
    only when there are exactly four, and a bad time stamp raises `ValueError`.
  - `clear_input_state(state, time)` releases every key and stamps the state.
  - The event hooks (`key_pressed`, `mouse_moved`, `text_entered`, ...) record
    held keys, held buttons, the mouse position, the wheel total and typed
    characters, and return `True`.
- `boxarena.game_server`: `GameServer(clock=None)`. `start(players)` begins a
  game with the given player addresses; `update()` simulates a frame, keeps at
  most 20 frames of history and appends an `(message, ip)` pair for every
  player to `udp_outbox`; `received_udp(message, ip, time_stamp)` applies a
  player's input to the frames newer than it and replays them;
  `received_tcp` only remembers the latest message from each player in
  `last_tcp`. `update()` before `start()` raises `RuntimeError`. The clock is
  a callable returning milliseconds and defaults to the system clock.
- `boxarena.game_client`: `GameClient(navigator, surface, font, clock=None,
  key_state=None)`, the page where the game is played. Each `update()` reads
  the arrow keys through `key_state` (by default pygame's keyboard state),
  simulates one step, keeps at most 20 frames, and queues the encoded input
  with `send_message_to_client`. `udp_message_received(message, time_stamp)`
  loads the server's state into the first frame newer than `time_stamp` and
  replays the frames before it. `draw()` draws the newest frame.
- `boxarena.view`: `View(surface)` draws the box as a red rectangle;
  `resized` records the new size.
- `boxarena.widgets`: `Button`, `TextBox`, `IpTextBox` and `PortTextBox`.
  A button reports a click when pressed and released inside its bounds. A
  text box takes focus when clicked and, while focused, takes typed code
  points: 10 (Enter) makes `text_entered` return `True`, 8 deletes the last
  character. `IpTextBox` accepts digits (at most three per octet) and at most
  three periods; `PortTextBox` accepts at most five digits. The `font`
  argument is a font file path or `None` for pygame's default font.
- `boxarena.page`: `Navigator` (holds `current`, the index of the page on
  screen) and `Page`, the base screen. `send_message_to_client` queues text
  (queued texts are concatenated) and `take_message` returns and clears it.
- `boxarena.pages`: `PageIndex` and the menu screens `HomePage`,
  `MultiplayerPage`, `ServerPage(navigator, surface, font, port,
  local_address=None)`, `ClientPage` and `ClientMatchmakingPage`.

## Page messages

- `MultiplayerPage` queues `"loginToOwnServer"` when Server is clicked.
- `ServerPage` queues `"logoutOfOwnServer"` (Back) or `"startGame"` (Start).
- `ClientPage` queues `"<ip>:<port>"` when Connect is clicked or Enter is
  typed in a field, and moves to the matchmaking page once its
  `connection_stage` is 3.
- `ClientMatchmakingPage` queues `"logout"` when Log Out is clicked.
- `GameClient` queues the encoded input state once per frame.

## What it does not do

The package has no network layer: nothing opens sockets, sends the queued
messages or the `GameServer` outboxes, or delivers received messages to
`received_udp` and `udp_message_received`. There is also no application
object or window loop that creates the pages, routes events to the current
page and acts on their messages, and no command to start a game. These are
left to the program that uses the package.