"""Exception hierarchy for the completion engine.

Expected failures (bad vocabulary entries, unreadable sources) get their own
types so loaders can skip them without hiding programming mistakes.
"""


class CarFindError(Exception):
    """Base exception for all carfind errors."""


class UnsupportedCharacterError(CarFindError, ValueError):
    """A word contains a character outside the index alphabet."""

    def __init__(self, word: str, char: str):
        super().__init__(f"Unsupported character {char!r} in {word!r}")
        self.word = word
        self.char = char


class VocabularySourceError(CarFindError):
    """A vocabulary file exists but cannot be read as records."""
