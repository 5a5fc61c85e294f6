# wordtok/words/rules.py
"""
Does:
    Compiled recognizer tables for the word scanner:
      - PIPELINE: ordered (name, pattern, kind) rules, first match wins
      - APOSTROPHE_RULES: elision / enclitic / name-initial disambiguation
      - compound-word matching with the French clitic-pronoun exception
      - generic fallback (single punctuation codepoint or alphanumeric run)

Inputs:
    - text: the full string being scanned
    - pos: char index where the next token must start (junk already skipped)

Outputs:
    - end offsets (and a kind, for the pipeline); never a token object.
      The scanner owns token construction.

Notes:
    - Every pattern is applied with pattern.match(text, pos), so they are
      implicitly anchored at the cursor. Do not add '^' to them.
    - ORDER IS IMPORTANT. Digits and '#' are Emoji-class codepoints: only
      the position of the hashtag and number rules keeps "#123" from being
      read as an emoji.
    - Tables are built once at import time and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import regex as re  # 'regex' for \p{Alpha}, \p{Lu} and the emoji properties

from wordtok.types import TokenKind

VOWELS = "aáàâäąåoôóøeéèëêęiíïîıuúùûüyÿæœ"
CONSONANTS_APOSTROPHE = "cdjlmnst"
LETTERS_START_NAME = "dlmno"
APOSTROPHES = "'’"  # ', ’

# How far past an embedded apostrophe the fallback scan may look.
APOSTROPHE_LOOKAHEAD = 5

_ZWJ = "\u200d"
_VS16 = "\ufe0f"
_REGIONAL_INDICATORS = "[\U0001F1E6-\U0001F1FF]"


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern
    kind: TokenKind


def _rule(name: str, pattern: str, kind: TokenKind, flags: int = 0) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern, flags), kind=kind)


_EMOJI = (
    # Regional indicators (flags)
    f"{_REGIONAL_INDICATORS}+"
    # ZWJ sequence with optional trailing variation selector
    + rf"|\p{{Emoji}}(?:{_ZWJ}\p{{Emoji}})+{_VS16}?"
    # Modifier sequence
    + rf"|\p{{Emoji_Modifier_Base}}(?:{_VS16}?\p{{Emoji_Modifier}})?"
    # Single presentation emoji with optional trailing variation selector
    + rf"|\p{{Emoji_Presentation}}{_VS16}?"
)

# ASCII emoticons. Letter mouths (":p", ":D") must not run into a word and
# reversed faces only open with a bracket or a slash so "):" or "8)" stay
# punctuation / numbers.
_SMILEY = (
    r"(?:"
    r"-+>|<-+"
    r"|[<>]?[:;=][\-o*']?[)\](\[dDpP/}{@|\\]"
    r"|[(\[/\\][\-o*']?[:;=]"
    # "<3" and ":3" only when not glued to a word or number ("a<3", "1:3")
    r"|(?<![\p{Alpha}\d])[<:]3|\^\^"
    r")(?![\p{Alpha}\d])"
)

_NUMBER = r"-?\d+(?:_\d+)*(?:[.,]\d+)?\b"

# NOTE: order IS important
PIPELINE: Tuple[Rule, ...] = (
    _rule("url", r"https?://[^\s,;]+", TokenKind.URL, re.IGNORECASE),
    _rule(
        "email",
        r"[a-z0-9!#$%&*+\-/=?^_`{|}~]{1,64}@[a-z]{2,8}\.[a-z]{2,8}(?:\.[a-z]{2,8})*",
        TokenKind.EMAIL,
        re.IGNORECASE,
    ),
    # Keep the trailing period inside the word
    _rule(
        "abbreviation",
        r"(?:app?t|etc|[djs]r|prof|mlle|mgr|min|mrs|m[rs]|m|no|pp?|st|vs)\.",
        TokenKind.WORD,
        re.IGNORECASE,
    ),
    _rule("acronym", r"\p{Lu}(?:\.\p{Lu})+\.?", TokenKind.WORD),
    _rule("hashtag", r"[#$]\p{Alpha}[\p{Alpha}\d]+\b", TokenKind.HASHTAG, re.IGNORECASE),
    _rule("mention", r"@\p{Alpha}[\p{Alpha}\d_]+\b", TokenKind.MENTION, re.IGNORECASE),
    _rule("number", _NUMBER, TokenKind.NUMBER),
    _rule("emoji", _EMOJI, TokenKind.EMOJI),
    _rule("smiley", _SMILEY, TokenKind.SMILEY),
    # Early return for plain words
    _rule("word", r"\p{Alpha}+(?=\s|$)", TokenKind.WORD),
)

_A = f"[{APOSTROPHES}]"

# Each rule has exactly one group; the token ends where the group ends.
APOSTROPHE_RULES: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        # aujourd'hui, can't, aren't
        rf"(aujourd{_A}hui|\p{{Alpha}}+n{_A}t)",
        # 'twas 'tis 'll 're 've 'd 'm 's
        rf"({_A}(?:twas|tis|ll|re|ve|[dms]))\b",
        # Roman elided articles: l'amour, qu'on, l'#hashtag
        rf"((?:qu|[{CONSONANTS_APOSTROPHE}]){_A})[{VOWELS}h#@]\p{{Alpha}}*\b",
        # English contractions after a single letter: I'll, I'm
        rf"(\p{{Alpha}}){_A}(?:ll|re|ve|[dms])\b",
        # Names: O'Hara, N'diaye, M'Leod
        rf"([{LETTERS_START_NAME}]{_A}\p{{Alpha}}+)\b",
    )
)

COMPOUND_WORD = re.compile(
    rf"[\p{{Alpha}}\d]+(?:[\-_·]+[\p{{Alpha}}\d][{APOSTROPHES}\p{{Alpha}}\d]*)+"
)
_DIGIT_GROUPS = re.compile(_NUMBER)
FRENCH_ILLEGAL_COMPOUND = re.compile(
    r"(?:-t)?-(?:je|tu|ils?|elles?|[nv]ous|on|les?|la|moi|toi|lui|y)$",
    re.IGNORECASE,
)

_ALNUM = re.compile(r"[\p{Alpha}\p{N}]")
_ALNUM_RUN = re.compile(r"[\p{Alpha}\p{N}]+")


def is_alnum(ch: str) -> bool:
    return _ALNUM.match(ch) is not None


def is_junk_or_whitespace(ch: str) -> bool:
    # Control characters and whitespace never belong to a token.
    return ch <= "\x1f" or ch.isspace()


def first_match(text: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    """Return (kind, end) of the first PIPELINE rule matching at pos."""
    for rule in PIPELINE:
        m = rule.pattern.match(text, pos)
        if m is not None and m.end() > pos:
            return rule.kind, m.end()
    return None


def match_compound(text: str, pos: int) -> Optional[Tuple[int, int]]:
    """
    Match a hyphen/underscore/middle-dot compound at pos.

    Returns (end, resume): the token is text[pos:end] and scanning continues
    at resume. When the compound ends with a French clitic pronoun
    ("dis-moi", "est-il", "va-t-on") the token stops at the first hyphen and
    the hyphen itself is skipped.
    """
    m = COMPOUND_WORD.match(text, pos)
    if m is None:
        return None

    span = m.group(0)
    # "1_000" is a number, not a compound
    if _DIGIT_GROUPS.fullmatch(span):
        return None

    if FRENCH_ILLEGAL_COMPOUND.search(span) is None:
        return m.end(), m.end()

    i = pos + span.index("-")
    return i, i + 1


def match_apostrophe(text: str, pos: int) -> Optional[int]:
    """Return the end offset of the first apostrophe rule matching at pos."""
    for pattern in APOSTROPHE_RULES:
        m = pattern.match(text, pos)
        if m is not None:
            return m.end(1)
    return None


def _interior_apostrophe_end(text: str, start: int, i: int) -> int:
    # text[i] is an apostrophe closing the run text[start:i].
    window = text[i + 1:i + 1 + APOSTROPHE_LOOKAHEAD]
    head = text[start:i].lower()

    if head.endswith("aujourd") and window[:3].lower() == "hui":
        return i + 4
    if head.endswith("n") and window[:1].lower() == "t":
        if len(window) == 1 or not is_alnum(window[1]):
            return i + 2
    return i


def match_fallback(text: str, pos: int) -> Tuple[TokenKind, int]:
    """
    Generic scan: one non-alphanumeric codepoint is punctuation, otherwise
    the maximal alphanumeric run, extended over an interior apostrophe for
    "…n't" and "aujourd'hui".
    """
    if not is_alnum(text[pos]):
        return TokenKind.PUNCTUATION, pos + 1

    end = _ALNUM_RUN.match(text, pos).end()
    if end < len(text) and text[end] in APOSTROPHES:
        end = _interior_apostrophe_end(text, pos, end)
    return TokenKind.WORD, end
