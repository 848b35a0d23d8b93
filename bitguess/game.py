"""Core logic of the six-question number guessing game."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

BITS = 6
UPPER = 1 << BITS
FINAL_BIT = BITS - 1
PER_LINE = 8


@dataclass
class Game:
    """The number being rebuilt bit by bit, and the bit asked about now."""

    answer: int = 0
    bit: int = 0

    def set_bit(self, bit: int) -> None:
        """Mark ``bit`` of the answer as 1."""
        self.answer |= 1 << bit

    def unset_bit(self, bit: int) -> None:
        """Mark ``bit`` of the answer as 0."""
        self.answer &= ~(1 << bit)

    def shift_bit(self) -> None:
        """Move on to the next bit."""
        self.bit += 1

    def reset_bit(self) -> None:
        """Go back to the first bit."""
        self.bit = 0

    @property
    def is_final(self) -> bool:
        """True while the last bit is being asked about."""
        return self.bit == FINAL_BIT


def numbers_for_bit(bit: int) -> list[int]:
    """All numbers from 0 to 63 that have ``bit`` set."""
    mask = 1 << bit
    return [number for number in range(UPPER) if number & mask]


def format_numbers(numbers: Iterable[int]) -> str:
    """Lay numbers out two digits wide, eight to a line, comma separated."""
    numbers = list(numbers)
    last = len(numbers) - 1
    parts: list[str] = []
    for index, number in enumerate(numbers):
        parts.append(f"{number:02d}")
        if (index + 1) % PER_LINE == 0:
            parts.append("\n")
        elif index < last:
            parts.append(", ")
    return "".join(parts)