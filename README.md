# turtlenet

turtlenet interprets a small dialect of Logo. It turns a turtle program into
the list of line segments that the turtle draws on an 800 × 600 canvas. The
turtle starts in the middle of the canvas. It faces up and its pen is down.

You can use it as a library. You can also run it as a TCP server that takes
programs from clients and sends back the lines they draw. A client shows those
lines in a window, and a checker runs whole directories of programs.

## The language

| Command              | Effect                                                |
|----------------------|-------------------------------------------------------|
| `forward N`          | move N steps in the current direction                 |
| `back N`             | move N steps backwards                                |
| `right A`            | turn clockwise by A degrees                           |
| `left A`             | turn anticlockwise by A degrees                       |
| `pendown`            | draw while moving                                     |
| `penup`              | move without drawing                                  |
| `home`               | return to the centre, facing up                       |
| `clearscreen`        | return to the centre and erase everything drawn       |
| `repeat N [ ... ]`   | run the bracketed commands N times                    |
| `; text`             | a comment running to the end of the line              |

How the language behaves:

- Commands are separated by whitespace.
- Numbers may be integers, decimals or use an exponent, such as `1.5e2`.
- A program must hold at least one command.
- A `repeat` block must hold at least one command.
- The repeat count must be finite. A fractional count is truncated to a whole
  number.
- Screen coordinates grow to the right and downwards.
- The heading is converted to radians using 3.14 in place of π, so turns are
  very slightly off a true circle.

For example:

```
; a square
repeat 4 [ forward 100 right 90 ]
```

## Using the library

```python
from turtlenet.engine import run
from turtlenet.logo_parser import parse, LogoSyntaxError

lines = run("repeat 4 [ forward 100 right 90 ]")
for line in lines:
    print(line.start, line.end)

try:
    parse("forward")
except LogoSyntaxError as error:
    print("not a valid program:", error)
```

### `turtlenet.engine.run(code)`

Parses and runs a program and returns the list of `Line` objects it drew. It
raises `LogoSyntaxError` if the program does not parse.

### `turtlenet.logo_parser.parse(code)`

Returns the program as a list of nodes.

`LogoSyntaxError` is a subclass of `ValueError`. It has these attributes:

- `position`: the offset in the text where the error was found.
- `line`: the line number of that position, counting from 1.
- `column`: the column of that position, counting from 1.

### `turtlenet.nodes`

This module defines the node classes:

- `MovementNode`
- `DirectionNode`
- `PenNode`
- `LoopNode`, which also has `add_command`
- `OriginNode`
- `CommentNode`

Each node has an `execute(turtle)` method, and `str(node)` gives a short
description of it.

### `turtlenet.turtle_state.TurtleState`

Holds the turtle's position, direction and pen. Its methods are:

- `origin`
- `clear_screen`
- `set_pen`
- `move`
- `turn`

It records every segment drawn, while the pen is down, in its `lines` list.

A `Line` has `start` and `end` points and a `coords` tuple `(x0, y0, x1, y1)`.

### `turtlenet.thread_pool.ThreadPool`

A fixed set of worker threads. `submit(task)` queues a callable. `shutdown()`
finishes every queued task and then joins the workers. The pool can also be
used as a context manager.

## Running the server and client

Start the server:

```
turtlenet-server [--host 0.0.0.0] [--port 12345] [--workers 4]
```

It handles each client on a pool of worker threads. For every connection the
server does this:

1. It reads one program.
2. It prints how many lines the program produced.
3. It replies with those lines and closes the connection.

A program that does not parse is reported on standard error and answered with
zero lines.

The server runs until it is interrupted.

Run the client with a Logo file:

```
turtlenet-client [path] [--host 127.0.0.1] [--port 12345]
```

If no path is given, the client asks for one. It sends the program to the
server and shows the returned lines in a window until the window is closed.
The window is drawn with `tkinter`, which must be available in your Python.

The client exits with status 1 in these cases:

- the connection fails;
- no path was given;
- the file cannot be read;
- no lines come back.

### The wire format

A request is a program in UTF-8, preceded by its length in bytes as a 4-byte
big-endian integer.

A reply starts with the line count as a 4-byte big-endian integer. After the
count come four little-endian 32-bit floats per line: start x, start y, end x,
end y.

The functions that read and write these messages are in the two modules:

- `turtlenet.server`: `receive_code`, `send_lines`, `handle_client` and
  `serve`.
- `turtlenet.client`: `send_code`, `receive_lines` and `draw_lines`.

## Checking a collection of programs

Run the checker on a directory:

```
turtlenet-suite [root]
```

It runs every `.logo` file in the `passing` and `failing` directories under
`root`, which defaults to `tests`:

- Each file in `passing` is expected to draw at least one line.
- Each file in `failing` is expected to draw nothing. A file that fails to
  parse counts as drawing nothing.

The checker prints `[PASS]` or `[FAIL]` for each file, followed by a summary
such as `Summary: 5/6 tests passed.` It exits with status 1 only if the
directories cannot be read.

The same steps are available from `turtlenet.suite` as three functions:

- `run_test_file(path)`
- `collect_cases(root)`
- `run_suite(root, out)`, which returns `(passed, total)`.

## Development

```
pip install -e ".[test]"
pytest
```