"""Screen-by-screen version of the game, as a button-driven window shows it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from bitguess.game import Game, format_numbers, numbers_for_bit


class Phase(Enum):
    INITIAL = auto()
    QUESTION = auto()
    FINAL = auto()


@dataclass(frozen=True)
class Screen:
    """What the window shows: its title, text labels and buttons."""

    title: str
    labels: tuple[str, ...]
    buttons: tuple[str, ...]
    phase: Phase


class Session:
    """Moves between the initial, question and final screens."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()
        self.screen = self._initial()

    def _initial(self) -> Screen:
        self.game.reset_bit()
        return Screen(
            title="Initial state",
            labels=(
                "Think of a number between 0 and 63, but don't tell me 🤫",
                "I’ll try to guess it 👀",
            ),
            buttons=("Start game",),
            phase=Phase.INITIAL,
        )

    def _question(self) -> Screen:
        bit = self.game.bit
        return Screen(
            title=f"Question {bit + 1}",
            labels=(
                "Do you see your number in this list? 👀",
                format_numbers(numbers_for_bit(bit)),
            ),
            buttons=("Yes", "No"),
            phase=Phase.QUESTION,
        )

    def _final(self) -> Screen:
        return Screen(
            title="Final state",
            labels=(f"The number you have guessed is {self.game.answer}",),
            buttons=("Restart",),
            phase=Phase.FINAL,
        )

    def _require(self, phase: Phase, action: str) -> None:
        if self.screen.phase is not phase:
            raise RuntimeError(f"cannot {action} on the {self.screen.title!r} screen")

    def start(self) -> None:
        """Press "Start game"."""
        self._require(Phase.INITIAL, "start")
        self.screen = self._question()

    def answer(self, yes: bool) -> None:
        """Press "Yes" or "No" on a question screen."""
        self._require(Phase.QUESTION, "answer")
        bit = self.game.bit
        if yes:
            self.game.set_bit(bit)
        else:
            self.game.unset_bit(bit)
        if self.game.is_final:
            self.screen = self._final()
        else:
            self.game.shift_bit()
            self.screen = self._question()

    def restart(self) -> None:
        """Press "Restart" on the final screen."""
        self._require(Phase.FINAL, "restart")
        self.screen = self._initial()