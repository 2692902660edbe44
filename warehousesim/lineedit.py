"""Editing logic of the single-line text fields."""

from __future__ import annotations

from collections.abc import Iterable

_ENTER_KEYS = ("\r", "\n")
_BACKSPACE = "\b"


def _key_char(key: int | str) -> str:
    """Normalise a key to its ASCII character; BIOS key codes keep the low byte."""
    if isinstance(key, int):
        return chr(key & 0xFF)
    if len(key) != 1:
        raise ValueError(f"a key is a single character, got {key!r}")
    return key


class LineEditor:
    """A bounded text field accepting digits and letters, lowercased.

    Uppercase letters are stored in lowercase. Backspace removes the last
    character; Enter ends the input. Anything else is ignored.
    """

    def __init__(self, text: str = "", limit: int = 18, allow_underscore: bool = False):
        self.text = text
        self.limit = limit
        self.allow_underscore = allow_underscore
        self.finished = False

    def _accepts(self, char: str) -> bool:
        if "0" <= char <= "9" or "a" <= char <= "z":
            return True
        return self.allow_underscore and char == "_"

    def feed(self, key: int | str) -> bool:
        """Apply one key. Return True once Enter has ended the input."""
        if self.finished:
            return True
        char = _key_char(key)
        if char in _ENTER_KEYS:
            self.finished = True
        elif len(self.text) < self.limit and self._accepts(char):
            self.text += char
        elif len(self.text) < self.limit and "A" <= char <= "Z":
            self.text += char.lower()
        elif char == _BACKSPACE and self.text:
            self.text = self.text[:-1]
        return self.finished

    def feed_all(self, keys: Iterable[int | str]) -> str:
        """Apply keys until Enter or the keys run out; return the text."""
        for key in keys:
            if self.feed(key):
                break
        return self.text