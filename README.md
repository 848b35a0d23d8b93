# bitguess

Think of a number between 0 and 63 and keep it to yourself. bitguess shows you
six lists of numbers and asks whether your number is in each one. After the
sixth answer it tells you your number.

## How it works

Every number from 0 to 63 fits in six bits. Question *n* lists every number
that has bit *n* set. A "yes" sets that bit in the answer and a "no" clears
it. Once all six questions are answered, every bit is known, and so is the
number.

## Playing in the terminal

```
pip install bitguess
bitguess
```

The game clears the screen with an ANSI escape sequence and asks you to think
of a number. Press ENTER when you are ready. Each round lists the numbers that
have the current bit set and asks `[Y]es/[N]o`. Only the first non-blank
character of your reply matters: `Y` or `y` means yes, and anything else means
no. When the number has been shown, press ENTER to play again. The game ends
when you press Ctrl-C or when input runs out.

## Using it as a library

`bitguess.game` holds the game's state and two helpers:

```python
from bitguess.game import Game, numbers_for_bit, format_numbers

numbers = numbers_for_bit(0)    # [1, 3, 5, ..., 63]
print(format_numbers(numbers))  # two digits wide, eight to a line, comma separated

game = Game()
game.set_bit(0)    # game.answer == 1
game.shift_bit()   # game.bit == 1
game.is_final      # True only while game.bit == 5
```

`bitguess.session.Session` runs the game one screen at a time, with no
terminal involved. Call `start()`, then `answer(True)` or `answer(False)` once
for each of the six questions, and `restart()` to go back to the first screen.
These methods return nothing. After each call, `session.screen` holds a
`Screen` with the `title`, the text `labels`, the `buttons` on offer and the
`phase` (`Phase.INITIAL`, `Phase.QUESTION` or `Phase.FINAL`). A call made on
the wrong screen, such as `answer()` before `start()`, raises `RuntimeError`.

```python
from bitguess.session import Session

session = Session()
session.start()
for yes in (True, False, True, False, False, False):
    session.answer(yes)
print(session.screen.labels[0])  # The number you have guessed is 5
```

`bitguess.states` holds the terminal version as a state machine. Its states
are `InitialState`, `QuestionState`, `WaitingForUserInput` and `FinalState`.
`Machine` holds the game and the current state. `change_state()` leaves the
current state and enters the new one, and `update()` runs the current state.
A `Machine` can be given its own `stdin`, `stdout` and `clear` callable, so it
can be driven without a real terminal.

## What it does not do

bitguess does not draw a window. `Session` describes each screen's title,
text and buttons, but showing them and wiring the buttons to `start()`,
`answer()` and `restart()` is left to the caller.

## Running the tests

```
pip install "bitguess[test]"
pytest
```