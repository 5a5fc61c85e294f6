from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UnknownTokenKindError(ValueError):
    """Raised when a token kind name is not one of the canonical names."""


# -----------------------
# Token kinds
# -----------------------

class TokenKind(Enum):
    """Closed set of token kinds emitted by the word scanner.

    Values are the canonical lowercase names used by configuration files.
    """
    WORD = "word"
    HASHTAG = "hashtag"
    MENTION = "mention"
    EMOJI = "emoji"
    PUNCTUATION = "punct"
    NUMBER = "number"
    URL = "url"
    EMAIL = "email"
    SMILEY = "smiley"

    def as_str(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str | TokenKind) -> TokenKind:
        if isinstance(name, TokenKind):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownTokenKindError(f"unknown word token kind {name}") from None

    from_str = parse

    @classmethod
    def all(cls) -> frozenset[TokenKind]:
        return frozenset(cls)

    def __str__(self) -> str:
        return self.value


# -----------------------
# Tokens
# -----------------------

@dataclass(frozen=True)
class WordToken:
    """
    A classified span of the scanned text.
    Fields:
      kind: one of TokenKind
      text: the exact slice of the input (never normalized)
      start: inclusive char index in the original string
      end: exclusive char index in the original string
    """
    kind: TokenKind
    text: str
    start: int = 0
    end: int = 0

    @classmethod
    def word(cls, text: str, start: int = 0, end: int | None = None) -> WordToken:
        return cls(TokenKind.WORD, text, start, start + len(text) if end is None else end)

    def to_pair(self) -> tuple[str, TokenKind]:
        return (self.text, self.kind)

    def is_junk(self) -> bool:
        if self.kind is not TokenKind.WORD:
            return False
        from wordtok.words.junk import is_junk
        return is_junk(self.text)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.as_str(),
            "text": self.text,
            "start": int(self.start),
            "end": int(self.end),
        }
