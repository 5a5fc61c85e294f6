# wordtok/hashtags.py
"""
Does:
    Split the body of a hashtag into its camelCase / number parts:
      #TestOkFinal -> Test, Ok, Final
      #TDF2018     -> TDF, 2018
      #TheID2018   -> The, ID, 2018

Notes:
    - Four states: UPPER_START, UPPER_NEXT, NUMBER, LOWER.
    - An uppercase run followed by a lowercase letter gives its last letter
      to the next part (ID|Information, not IDI|nformation).
    - Independent from the word scanner: feed it the text of a HASHTAG token.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

import regex as re

HASHTAG_SIGILS = "#$"

# Unicode N* categories only; str.isnumeric also accepts CJK numerals like "一".
_NUMERIC = re.compile(r"\p{N}")


def _is_numeric(ch: str) -> bool:
    return _NUMERIC.match(ch) is not None


class _State(Enum):
    UPPER_START = 0
    UPPER_NEXT = 1
    NUMBER = 2
    LOWER = 3


# (cut, next_state): cut is None (no boundary) or how many chars before the
# current one the boundary falls (0 = right before it, 1 = carry-back).
def _transition(state: _State, ch: str) -> Tuple[Optional[int], _State]:
    if state is _State.LOWER:
        if ch.isupper():
            return 0, _State.UPPER_START
        if _is_numeric(ch):
            return 0, _State.NUMBER
        return None, _State.LOWER

    if state is _State.UPPER_START:
        if ch.islower():
            return None, _State.LOWER
        if _is_numeric(ch):
            return 0, _State.NUMBER
        return None, _State.UPPER_NEXT

    if state is _State.UPPER_NEXT:
        if ch.islower():
            return 1, _State.LOWER
        if _is_numeric(ch):
            return 0, _State.NUMBER
        return None, _State.UPPER_NEXT

    # NUMBER
    if _is_numeric(ch):
        return None, _State.NUMBER
    if ch.isupper():
        return 0, _State.UPPER_START
    return 0, _State.LOWER


class HashtagParts:
    """Iterator over the parts of a hashtag body (sigil already removed)."""

    __slots__ = ("body", "_offset", "_index", "_state", "_done")

    def __init__(self, body: str):
        self.body = body
        self._offset = 0
        # The first codepoint always opens the first part.
        self._index = 1
        self._state = _State.UPPER_START
        self._done = not body

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._done:
            raise StopIteration

        body = self.body
        while self._index < len(body):
            i = self._index
            self._index += 1
            cut, self._state = _transition(self._state, body[i])
            if cut is not None:
                part = body[self._offset:i - cut]
                self._offset = i - cut
                return part

        self._done = True
        return body[self._offset:]


def split_hashtag(hashtag: str) -> List[str]:
    """Split a hashtag ("#TestOkFinal") or a bare body ("TestOkFinal")."""
    body = hashtag[1:] if hashtag and hashtag[0] in HASHTAG_SIGILS else hashtag
    return list(HashtagParts(body))
