from __future__ import annotations

from wordtok.words.rules import VOWELS

_VOWEL_SET = frozenset(VOWELS + VOWELS.upper())

# Thresholds are empirical. Keep them as is.
MAX_BYTES = 30
MAX_IDENTICAL_RUN = 3
MAX_VOWEL_RUN = 6
MAX_CONSONANT_RUN = 7


def starts_with_vowel(text: str) -> bool:
    return bool(text) and text[0] in _VOWEL_SET


def is_junk(text: str) -> bool:
    """
    A word token is junk if:
      1. it is too long to be a plausible word (> 30 bytes in UTF-8)
      2. it has more than 3 consecutive identical characters
      3. it has more than 7 consecutive consonants
      4. it has more than 6 consecutive vowels
      5. it has no vowel at all, unless it contains a non-letter ("l'", "qu'")
    Single pass; the first triggered condition wins.
    """
    if len(text.encode("utf-8")) > MAX_BYTES:
        return True

    total_vowels = 0
    vowel_run = 0
    consonant_run = 0
    identical_run = 0
    has_punct = False
    last = None

    for ch in text:
        if ch == last:
            identical_run += 1
            if identical_run > MAX_IDENTICAL_RUN:
                return True
        else:
            last = ch
            identical_run = 1

        if ch in _VOWEL_SET:
            consonant_run = 0
            vowel_run += 1
            total_vowels += 1
        elif ch.isalpha():
            vowel_run = 0
            consonant_run += 1
        else:
            vowel_run = 0
            consonant_run = 0
            has_punct = True

        if vowel_run > MAX_VOWEL_RUN or consonant_run > MAX_CONSONANT_RUN:
            return True

    return total_vowels == 0 and not has_punct
