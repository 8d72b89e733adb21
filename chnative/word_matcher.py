"""A tiny automaton that spots a single word in a character stream."""

from __future__ import annotations


class WordMatcher:
    """Case-insensitive matcher fed one character at a time.

    A mismatch resets the matcher to the start of the word without
    re-examining the character that broke the match.
    """

    def __init__(self, needle: str) -> None:
        if not needle:
            raise ValueError("needle must not be empty")
        self._word = needle.upper()
        self._position = 0

    def match(self, char: str) -> bool:
        """Feed one character; return True when the whole word has just been seen."""
        if self._word[self._position] == char.upper():
            if self._position == len(self._word) - 1:
                self._position = 0
                return True
            self._position += 1
        else:
            self._position = 0
        return False