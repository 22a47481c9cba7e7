# tile2048

The 2048 sliding-tile puzzle as a small Tkinter desktop game. Slide the
tiles with the arrow keys. When two equal tiles meet they merge into one
tile holding their sum, and that sum is added to your score. After every
move a new tile appears on a free cell: a 2, or one time in four a 4. The
game is over when the board is full and no two neighbouring tiles are
equal.

## Features

- Board size from 4×4 up to 10×10. You choose it on the Settings screen,
  together with your player name. Values outside that range are clamped.
- A leaderboard client. When a game ends, the score is sent to a
  leaderboard server. The Leaderboard screen shows the entries the server
  returns, highest score first.
- Tiles are coloured by value, from 2 up to 2048.

## Installing and running

```
pip install .
tile2048
```

The window uses Tkinter from the standard library, so your Python build
needs Tk support. No other packages are required.

`tile2048` accepts these options:

- `--host HOST`: the leaderboard server host. The default is `127.0.0.1`.
- `--port PORT`: the leaderboard server port. The default is `3000`.

The main menu offers *Start Game*, *Leaderboard*, *Settings* and *Quit*.
On the game screen, *Reset* starts a new board and *Back* returns to the
menu. If the leaderboard server cannot be reached, a "Connection Error"
warning is shown and play goes on.

## What it does not include

This package contains only the client side of the leaderboard. It has no
leaderboard server and stores no scores itself. Without a server listening
at the configured host and port, the Leaderboard screen stays empty and
finished games are not recorded.

## Using the pieces from Python

The board logic lives in `tile2048.game`:

```python
from tile2048.game import Direction, Game

game = Game(4, 4)
game.move(Direction.LEFT)
print(game.score, game.is_game_over())
print(game.board)  # tuple of rows; 0 marks an empty cell
```

`Game` also provides:

- `move_left`, `move_right`, `move_up` and `move_down`
- `get_cell` and `set_cell`, which raise `IndexError` outside the board
- `spawn_random_cell`, `reset_board`, `reset_score` and `is_board_full`
- the properties `rows`, `cols` and `score`

`tile2048.protocol` builds and decodes the frames exchanged with the
leaderboard server. Each frame is a big-endian 32-bit length followed by
strings, and each string is a 32-bit byte count followed by UTF-16BE text.
The module provides:

- `encode_string`, `decode_string` and `encode_frame`
- `get_leaderboard_request` and `add_score_request`
- `ResponseDecoder`, an incremental decoder whose `feed` returns the
  completed `Response` objects
- `parse_leaderboard`, which reads `name:score;...` data into
  `LeaderboardItem`s
- `rank_items`
- `ProtocolError`, raised for malformed input

`tile2048.leaderboard.LeaderboardClient` is a context-managed TCP client.
Its methods are `connect`, `request_leaderboard`, `add_score`, `poll`,
`handle_data` and `close`. It keeps the last ranking in `items`. It raises
`ConnectionError` when the server cannot be reached.

`tile2048.controller.AppController` holds the screen flow (`Screen`), the
current `Settings` and the `Game`, independently of any window.

## Running the tests

```
pip install ".[test]"
pytest
```