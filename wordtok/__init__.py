from __future__ import annotations

from wordtok.hashtags import HashtagParts, split_hashtag
from wordtok.types import TokenKind, UnknownTokenKindError, WordToken
from wordtok.utils.text import reduce_lengthening
from wordtok.words.builder import WordTokenizer, WordTokenizerBuilder
from wordtok.words.junk import is_junk, starts_with_vowel
from wordtok.words.tokenizer import WordTokens, tokenize_words

__all__ = [
    "HashtagParts",
    "TokenKind",
    "UnknownTokenKindError",
    "WordToken",
    "WordTokenizer",
    "WordTokenizerBuilder",
    "WordTokens",
    "is_junk",
    "reduce_lengthening",
    "split_hashtag",
    "starts_with_vowel",
    "tokenize_words",
]
