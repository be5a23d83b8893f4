# gameboard

A small game board driven by menus. It opens with a splash screen that shows a
progress bar while it steps through its start-up checks and tries the network.
After that it shows a main menu with **Play**, **Credits** and **Settings**.
**Play** lists the registered games. **Credits** scrolls a list of credits up
the screen. Tic-Tac-Toe is the one game included.

The board draws on a 240×320 canvas. The `gameboard` command shows that canvas
in a pygame window and gives you five buttons: up, down, left, right and
action.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
gameboard
```

This opens the window. The splash screen runs first, then the main menu
appears. Close the window or press Ctrl+C to stop.

Options:

- `--scale N` sets how many window pixels make up one board pixel. The default
  is 2 and the value must be at least 1.
- `--offline` makes the network check on the splash screen fail. The splash
  screen then gives up after three attempts and continues.
- `--frames N` stops after N frames. Without it the board runs until the
  window is closed.

## Controls

| Key         | Button |
|-------------|--------|
| Arrow keys  | up, down, left, right |
| Space       | action |

- **Up / Down** move the menu selection. The selection wraps around at both
  ends.
- **Action** opens the highlighted item.
- **Up + Down** pressed together go back to the main menu from the game list
  or from the credits.
- In Tic-Tac-Toe, the four direction buttons move the cursor and **Action**
  marks the cell for the current player. X always moves first. Once the game
  is won or drawn, a message appears, and **Action** returns to the game list.

Each button reports a press only once until it is released. It will not
report another press within 200 ms of the last one. The screens and the game
also ignore a new press that comes within 200 ms of the last press they acted
on.

## Using it as a library

The parts can be used on their own:

- `gameboard.display.Canvas` is an in-memory RGB565 pixel buffer. It has
  rectangle, rounded-rectangle, line and circle primitives. Text is stored as
  placed `TextItem`s and measured in a 6×8 font. `gameboard.display.Display`
  adds centred text, menu items and titles on top of a canvas. `Color` holds
  the panel colours.
- `gameboard.buttons.Button` and `gameboard.buttons.Buttons` read input through
  any `reader(pin)` callable and any `clock()` that returns milliseconds.
  `millis()` is the default clock.
- `gameboard.games.Game` is the abstract base class for games, with `init()`
  and `loop()`. `gameboard.games.GameRegistry` holds up to ten games. Look them
  up with `get(name)` or by index. Once the registry is full, `register()`
  returns `False`.
- `gameboard.tictactoe.TicTacToe` is the built-in game. `GameState` tells you
  whether a game is still being played, won by X, won by O or drawn.
- `gameboard.screens.ScreenManager` owns the splash, main, games, game and
  credits screens and forwards each frame to the screen currently shown.
- `gameboard.network.NetworkManager` connects through a Wi-Fi object that you
  supply. It tracks whether the link is up, the IP address, and the state of
  an optional WebSocket client. `check_wifi_connection()` makes a single
  connection attempt and reports the result.
- `gameboard.app.Board` connects all of these and registers Tic-Tac-Toe. Call
  `setup()` once and then `step()` for each frame, or call `run(frames)`.

## What it does not do

- **Settings** has no screen of its own. Choosing it opens the credits.
- Tic-Tac-Toe is the only game. The credits also mention other games, but the
  package does not include them.
- The package does not include a WebSocket client. The `gameboard` command
  runs without one. `NetworkManager` uses a WebSocket only if you pass it a
  client object. With the command, the network check on the splash screen
  only asks whether the host machine is online, unless `--offline` is given.