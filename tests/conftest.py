# tests/conftest.py
import pytest

_ENV_KEYS = ("WORDTOK_MIN_CHARS", "WORDTOK_MAX_CHARS", "WORDTOK_FILTER_JUNK")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # A developer shell may export tokenizer overrides.
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
