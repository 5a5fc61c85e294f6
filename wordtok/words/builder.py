# wordtok/words/builder.py
"""
Does:
    Public configuration layer over the word scanner.
      - WordTokenizerBuilder: accumulates stopwords, a kind filter, length
        bounds and the junk toggle; build() compiles them once.
      - WordTokenizer: immutable, reusable (also across threads); filters the
        scanner output without touching token boundaries.

Notes:
    - The kind filter is a single set of EXCLUDED kinds. A whitelist is
      stored as its complement, so setting one always replaces the other.
    - Filter order: kind -> min length -> max length -> stoplist -> junk.
    - Lengths are counted in codepoints, not bytes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Iterable, Iterator, List, Optional, Union

import regex as re

from wordtok.types import TokenKind, WordToken
from wordtok.words.tokenizer import WordTokens

if TYPE_CHECKING:
    from wordtok.config import Config, TokenizerCfg

_LOGGER = logging.getLogger("wordtok.words.builder")

_NAIVE_WORD = re.compile(r"\b\w+\b")

KindLike = Union[TokenKind, str]


def compile_stoplist(words: Iterable[str]) -> Optional[re.Pattern]:
    """One case-insensitive whole-text matcher, or None if nothing to match."""
    alternatives = [re.escape(w) for w in words if w]
    if not alternatives:
        return None
    return re.compile("(?:" + "|".join(alternatives) + ")", re.IGNORECASE)


def _kinds(kinds: Iterable[KindLike]) -> FrozenSet[TokenKind]:
    if isinstance(kinds, (str, TokenKind)):
        kinds = [kinds]
    return frozenset(TokenKind.parse(k) for k in kinds)


def _check_count(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return int(value)


@dataclass(frozen=True)
class WordTokenizer:
    stoplist: Optional[re.Pattern] = None
    kind_blacklist: FrozenSet[TokenKind] = frozenset()
    min_token_char_count: Optional[int] = None
    max_token_char_count: Optional[int] = None
    filter_junk: bool = False

    @classmethod
    def from_config(cls, cfg: Union[Config, TokenizerCfg]) -> WordTokenizer:
        return WordTokenizerBuilder.from_config(cfg).build()

    def token_predicate(self, token: WordToken) -> bool:
        if token.kind in self.kind_blacklist:
            return False

        if self.min_token_char_count is not None and len(token.text) < self.min_token_char_count:
            return False

        if self.max_token_char_count is not None and len(token.text) > self.max_token_char_count:
            return False

        if self.stoplist is not None and self.stoplist.fullmatch(token.text):
            return False

        if self.filter_junk and token.is_junk():
            return False

        return True

    def tokenize(self, text: str) -> Iterator[WordToken]:
        return filter(self.token_predicate, WordTokens(text))

    def simple_tokenize(self, text: str) -> Iterator[WordToken]:
        """Bare \\w+ runs as word tokens, same filters, no entity recognition."""
        for m in _NAIVE_WORD.finditer(text):
            token = WordToken(TokenKind.WORD, m.group(0), m.start(), m.end())
            if self.token_predicate(token):
                yield token

    def tokens(self, text: str) -> List[WordToken]:
        return list(self.tokenize(text))

    def simple_tokens(self, text: str) -> List[WordToken]:
        return list(self.simple_tokenize(text))


class WordTokenizerBuilder:
    def __init__(self):
        self._stoplist: List[str] = []
        self._kind_blacklist: FrozenSet[TokenKind] = frozenset()
        self._min_token_char_count: Optional[int] = None
        self._max_token_char_count: Optional[int] = None
        self._filter_junk = False

    @classmethod
    def from_config(cls, cfg: Union[Config, TokenizerCfg]) -> WordTokenizerBuilder:
        section = getattr(cfg, "tokenizer", cfg)
        builder = cls().stopwords(section.load_stopwords())
        if section.kind_whitelist:
            builder.token_kind_whitelist(section.kind_whitelist)
        elif section.kind_blacklist:
            builder.token_kind_blacklist(section.kind_blacklist)
        if section.min_token_char_count is not None:
            builder.min_token_char_count(section.min_token_char_count)
        if section.max_token_char_count is not None:
            builder.max_token_char_count(section.max_token_char_count)
        if section.filter_junk:
            builder.filter_junk()
        return builder

    def insert_stopword(self, stopword: str) -> None:
        self._stoplist.append(str(stopword))

    def stopwords(self, words: Iterable[str]) -> WordTokenizerBuilder:
        for word in words:
            self.insert_stopword(word)
        return self

    def token_kind_blacklist(self, kinds: Iterable[KindLike]) -> WordTokenizerBuilder:
        self._kind_blacklist = _kinds(kinds)
        return self

    def token_kind_whitelist(self, kinds: Iterable[KindLike]) -> WordTokenizerBuilder:
        self._kind_blacklist = TokenKind.all() - _kinds(kinds)
        return self

    deny_kinds = token_kind_blacklist
    allow_kinds = token_kind_whitelist

    def min_token_char_count(self, n: int) -> WordTokenizerBuilder:
        self._min_token_char_count = _check_count("min_token_char_count", n)
        return self

    def max_token_char_count(self, n: int) -> WordTokenizerBuilder:
        self._max_token_char_count = _check_count("max_token_char_count", n)
        return self

    def filter_junk(self) -> WordTokenizerBuilder:
        self._filter_junk = True
        return self

    def build(self) -> WordTokenizer:
        stoplist = compile_stoplist(self._stoplist)
        _LOGGER.debug(
            "building word tokenizer: %d stopwords, excluded=%s, min=%s, max=%s, junk=%s",
            len(self._stoplist),
            sorted(k.as_str() for k in self._kind_blacklist),
            self._min_token_char_count,
            self._max_token_char_count,
            self._filter_junk,
        )
        return WordTokenizer(
            stoplist=stoplist,
            kind_blacklist=self._kind_blacklist,
            min_token_char_count=self._min_token_char_count,
            max_token_char_count=self._max_token_char_count,
            filter_junk=self._filter_junk,
        )
