from __future__ import annotations
from pathlib import Path

import pytest
from pydantic import ValidationError

from wordtok.config import Config, TokenizerCfg, apply_env_overrides, load_config
from wordtok.types import TokenKind
from wordtok.words.builder import WordTokenizer, WordTokenizerBuilder


def _texts(tokens):
    return [t.text for t in tokens]


def test_missing_file_yields_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == Config()
    assert cfg.tokenizer.stopwords == []
    assert cfg.tokenizer.filter_junk is False
    assert load_config(None) == Config()


def test_shipped_default_config_loads():
    path = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"
    cfg = load_config(path)
    assert cfg.tokenizer == TokenizerCfg()


def test_yaml_file(tmp_path):
    p = tmp_path / "tok.yaml"
    p.write_text(
        "tokenizer:\n"
        "  stopwords: [le, la]\n"
        "  kind_blacklist: [punct, number]\n"
        "  min_token_char_count: 2\n"
        "  filter_junk: true\n"
        "unrelated: 1\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.tokenizer.stopwords == ["le", "la"]
    assert cfg.tokenizer.kind_blacklist == [TokenKind.PUNCTUATION, TokenKind.NUMBER]
    assert cfg.tokenizer.min_token_char_count == 2
    assert cfg.tokenizer.filter_junk is True


def test_flat_keys_are_moved_under_tokenizer(tmp_path):
    p = tmp_path / "flat.yaml"
    p.write_text("stopwords: [le]\nmax_token_char_count: 4\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.tokenizer.stopwords == ["le"]
    assert cfg.tokenizer.max_token_char_count == 4


def test_single_kind_string_is_accepted():
    cfg = TokenizerCfg(kind_whitelist="emoji")
    assert cfg.kind_whitelist == [TokenKind.EMOJI]


def test_invalid_kind_is_rejected():
    with pytest.raises(ValidationError):
        TokenizerCfg(kind_blacklist=["verb"])


def test_blacklist_and_whitelist_are_exclusive():
    with pytest.raises(ValidationError):
        TokenizerCfg(kind_blacklist=["punct"], kind_whitelist=["word"])


def test_bounds_are_checked():
    with pytest.raises(ValidationError):
        TokenizerCfg(min_token_char_count=5, max_token_char_count=2)
    with pytest.raises(ValidationError):
        TokenizerCfg(min_token_char_count=0)
    TokenizerCfg(min_token_char_count=2, max_token_char_count=2)


def test_bad_yaml_raises_runtime_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("tokenizer: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuntimeError) as exc:
        load_config(p)
    assert "Failed to parse YAML" in str(exc.value)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WORDTOK_MIN_CHARS", "3")
    monkeypatch.setenv("WORDTOK_FILTER_JUNK", "yes")
    cfg = Config()
    apply_env_overrides(cfg)
    assert cfg.tokenizer.min_token_char_count == 3
    assert cfg.tokenizer.filter_junk is True
    assert cfg.tokenizer.max_token_char_count is None


def test_invalid_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("WORDTOK_MIN_CHARS", "abc")
    monkeypatch.setenv("WORDTOK_MAX_CHARS", "-1")
    cfg = Config()
    apply_env_overrides(cfg)
    assert cfg.tokenizer.min_token_char_count is None
    assert cfg.tokenizer.max_token_char_count is None


def test_stopwords_path(tmp_path):
    p = tmp_path / "stop.txt"
    p.write_text("# french articles\nle\n\n  la \n", encoding="utf-8")
    cfg = TokenizerCfg(stopwords=["un"], stopwords_path=p)
    assert cfg.load_stopwords() == ["un", "le", "la"]


def test_tokenizer_from_config(tmp_path):
    p = tmp_path / "tok.yaml"
    p.write_text(
        "tokenizer:\n"
        "  stopwords: [le]\n"
        "  kind_whitelist: [word]\n"
        "  min_token_char_count: 3\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    tokenizer = WordTokenizer.from_config(cfg)
    assert _texts(tokenizer.tokens("le chat, 12 un 🙏 souris!")) == ["chat", "souris"]
    # the section alone works too
    section_only = WordTokenizerBuilder.from_config(cfg.tokenizer).build()
    assert _texts(section_only.tokens("le chat, 12 un 🙏 souris!")) == ["chat", "souris"]


def test_default_config_builds_default_tokenizer():
    assert WordTokenizer.from_config(Config()) == WordTokenizer()
