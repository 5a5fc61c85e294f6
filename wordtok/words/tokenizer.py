from __future__ import annotations

from typing import Iterator, List

from wordtok.types import TokenKind, WordToken
from wordtok.words.rules import (
    first_match,
    is_junk_or_whitespace,
    match_apostrophe,
    match_compound,
    match_fallback,
)

# Word scanner with character offsets.
# Rules (non-negotiable):
# - Character offsets are source of truth. end is exclusive, text == source[start:end].
# - No normalization. Preserve original casing and codepoints.
# - Control characters (<= 0x1F) and whitespace are skipped, never emitted.
# - One token per pull, in this order:
#     compound word -> recognizer pipeline -> apostrophe rules -> fallback.
# - The cursor only moves forward and every pull consumes at least one char.
# - Memoryless: a token's kind never depends on the previous tokens.


class WordTokens:
    """Pull-based scanner over a single string.

    Iterating yields WordToken objects until the input is exhausted. Once
    exhausted it stays exhausted; build a new WordTokens to scan again.
    """

    __slots__ = ("text", "_pos")

    def __init__(self, text: str):
        self.text = text
        self._pos = 0

    def __iter__(self) -> Iterator[WordToken]:
        return self

    def _chomp(self) -> int:
        text = self.text
        n = len(text)
        i = self._pos
        while i < n and is_junk_or_whitespace(text[i]):
            i += 1
        self._pos = i
        return i

    def _emit(self, kind: TokenKind, start: int, end: int, resume: int | None = None) -> WordToken:
        self._pos = end if resume is None else resume
        return WordToken(kind=kind, text=self.text[start:end], start=start, end=end)

    def __next__(self) -> WordToken:
        text = self.text
        start = self._chomp()

        if start >= len(text):
            raise StopIteration

        compound = match_compound(text, start)
        if compound is not None:
            end, resume = compound
            return self._emit(TokenKind.WORD, start, end, resume)

        matched = first_match(text, start)
        if matched is not None:
            kind, end = matched
            return self._emit(kind, start, end)

        # NOTE: costlier than the table, so it only runs when nothing else did
        end = match_apostrophe(text, start)
        if end is not None:
            return self._emit(TokenKind.WORD, start, end)

        kind, end = match_fallback(text, start)
        return self._emit(kind, start, end)


def tokenize_words(text: str) -> List[WordToken]:
    """Scan the whole string, unfiltered."""
    return list(WordTokens(text))
