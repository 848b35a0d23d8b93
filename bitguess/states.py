"""Console version of the game, driven by a small state machine."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TextIO

from bitguess.game import Game, numbers_for_bit

_CLEAR_SCREEN = "\033[H\033[2J"


class State(ABC):
    """One stage of the console game."""

    @abstractmethod
    def enter(self, machine: Machine) -> None:
        """Run when the machine switches into this state."""

    @abstractmethod
    def execute(self, machine: Machine) -> None:
        """Run on every update while this state is current."""

    @abstractmethod
    def exit(self, machine: Machine) -> None:
        """Run when the machine switches out of this state."""


class InitialState(State):
    """Asks the player to think of a number."""

    def enter(self, machine: Machine) -> None:
        machine.clear()

    def execute(self, machine: Machine) -> None:
        machine.write("Think of a number between 0 and 63, but don't tell me 🤫\n")
        machine.write("I’ll try to guess it 👀\n\n")
        machine.game.reset_bit()
        machine.change_state(QuestionState())

    def exit(self, machine: Machine) -> None:
        machine.pause("Press ENTER when you are ready to play...")


class QuestionState(State):
    """Shows the numbers that have the current bit set."""

    def enter(self, machine: Machine) -> None:
        machine.clear()
        machine.write(f"Round {machine.game.bit + 1}\n")

    def execute(self, machine: Machine) -> None:
        machine.write("Do you see your number in this list? 👀\n")
        machine.write("".join(f"{n} " for n in numbers_for_bit(machine.game.bit)))
        machine.write("\n")
        machine.change_state(WaitingForUserInput())

    def exit(self, machine: Machine) -> None:
        machine.write("\n")


class WaitingForUserInput(State):
    """Reads the player's yes or no."""

    def enter(self, machine: Machine) -> None:
        machine.write("[Y]es/[N]o\n")
        machine.write("Your choice: ")

    def execute(self, machine: Machine) -> None:
        game = machine.game
        if machine.read_choice().upper() == "Y":
            game.set_bit(game.bit)
        else:
            game.unset_bit(game.bit)
        if game.is_final:
            machine.change_state(FinalState())
        else:
            machine.change_state(QuestionState())

    def exit(self, machine: Machine) -> None:
        machine.game.shift_bit()


class FinalState(State):
    """Reveals the number."""

    def enter(self, machine: Machine) -> None:
        machine.clear()
        machine.write(f"The number you have guessed is {machine.game.answer}\n\n")

    def execute(self, machine: Machine) -> None:
        machine.change_state(InitialState())

    def exit(self, machine: Machine) -> None:
        machine.pause("Press ENTER to start again...")


class Machine:
    """Holds the game, the current state and the console streams."""

    def __init__(
        self,
        game: Game | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.state: State = InitialState()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def clear(self) -> None:
        if self._clear is not None:
            self._clear()
        else:
            self.write(_CLEAR_SCREEN)

    def pause(self, prompt: str) -> None:
        """Show ``prompt`` and wait for a line of input."""
        self.write(prompt)
        self._stdout.flush()
        if not self._stdin.readline():
            raise EOFError("input closed")

    def read_choice(self) -> str:
        """Return the first non-blank character the player types."""
        self._stdout.flush()
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input closed")
            stripped = line.strip()
            if stripped:
                return stripped[0]

    def change_state(self, new_state: State) -> None:
        """Leave the current state, then enter ``new_state``."""
        self.state.exit(self)
        self.state = new_state
        self.state.enter(self)

    def update(self) -> None:
        self.state.execute(self)


def main(argv: list[str] | None = None) -> int:
    """Play in the console until input ends."""
    machine = Machine()
    try:
        while True:
            machine.update()
    except (EOFError, KeyboardInterrupt):
        machine.write("\n")
    return 0