import pytest

from bitguess.game import Game, format_numbers, numbers_for_bit


@pytest.mark.parametrize("bit", range(6))
def test_set_then_unset_bit(bit):
    game = Game()
    game.set_bit(bit)
    assert (game.answer >> bit) & 1 == 1
    assert game.answer == 1 << bit
    game.unset_bit(bit)
    assert game.answer == 0


def test_unset_leaves_other_bits():
    game = Game()
    for bit in range(6):
        game.set_bit(bit)
    game.unset_bit(2)
    assert [(game.answer >> b) & 1 for b in range(6)] == [1, 1, 0, 1, 1, 1]


def test_set_is_idempotent():
    game = Game()
    game.set_bit(3)
    first = game.answer
    game.set_bit(3)
    assert game.answer == first


def test_final_bit_reached_after_five_shifts():
    game = Game()
    for _ in range(4):
        game.shift_bit()
        assert not game.is_final
    game.shift_bit()
    assert game.is_final
    assert game.bit == 5


def test_reset_bit():
    game = Game()
    game.shift_bit()
    game.shift_bit()
    game.reset_bit()
    assert game.bit == 0
    assert not game.is_final


@pytest.mark.parametrize("bit", range(6))
def test_numbers_for_bit_membership(bit):
    numbers = numbers_for_bit(bit)
    assert len(numbers) == 32
    assert numbers == sorted(numbers)
    assert all(0 <= n < 64 for n in numbers)
    for n in range(64):
        assert (n in numbers) == bool((n >> bit) & 1)


def test_numbers_for_lowest_bit_are_odd():
    assert numbers_for_bit(0) == list(range(1, 64, 2))


@pytest.mark.parametrize("bit", range(6))
def test_format_numbers_round_trip(bit):
    numbers = numbers_for_bit(bit)
    text = format_numbers(numbers)
    lines = text.splitlines()
    assert len(lines) == 4
    parsed = []
    for line in lines:
        entries = line.split(", ")
        assert len(entries) == 8
        assert all(len(entry) == 2 for entry in entries)
        parsed.extend(int(entry) for entry in entries)
    assert parsed == numbers


def test_format_pads_single_digits():
    assert format_numbers([7]) == "07"


def test_format_full_line_ends_with_newline():
    text = format_numbers(range(8))
    assert text.endswith("\n")
    assert text.count(", ") == 7


def test_format_empty():
    assert format_numbers([]) == ""