"""Guess a hidden number from 0 to 63 by asking six yes/no questions."""

__version__ = "0.1.0"