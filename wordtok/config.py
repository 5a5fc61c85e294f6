# wordtok/config.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator, model_validator

from wordtok.types import TokenKind

_LOGGER = logging.getLogger("wordtok.config")


class TokenizerCfg(BaseModel):
    stopwords: list[str] = Field(default_factory=list, description="case-insensitive exact matches to drop")
    stopwords_path: Optional[Path] = None  # one word per line, '#' comments
    kind_blacklist: list[TokenKind] = Field(default_factory=list)
    kind_whitelist: list[TokenKind] = Field(default_factory=list)
    min_token_char_count: Optional[PositiveInt] = None
    max_token_char_count: Optional[PositiveInt] = None
    filter_junk: bool = False

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    @field_validator("kind_blacklist", "kind_whitelist", mode="before")
    @classmethod
    def _parse_kinds(cls, v: Any) -> list[TokenKind]:
        if v is None:
            return []
        if isinstance(v, (str, TokenKind)):
            v = [v]
        # UnknownTokenKindError is a ValueError -> surfaces as ValidationError
        return [TokenKind.parse(k) for k in v]

    @model_validator(mode="after")
    def _cross_invariants(self) -> TokenizerCfg:
        if self.kind_blacklist and self.kind_whitelist:
            raise ValueError("kind_blacklist and kind_whitelist are mutually exclusive")
        lo, hi = self.min_token_char_count, self.max_token_char_count
        if lo is not None and hi is not None and lo > hi:
            raise ValueError(f"min_token_char_count ({lo}) must be <= max_token_char_count ({hi})")
        return self

    def load_stopwords(self) -> list[str]:
        words = list(self.stopwords)
        if self.stopwords_path is None:
            return words
        with self.stopwords_path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    words.append(line)
        return words


class Config(BaseModel):
    tokenizer: TokenizerCfg = Field(default_factory=TokenizerCfg)
    model_config = ConfigDict(extra="ignore")


# --- flat YAML: tokenizer keys at top level ---
_FLAT_KEYS = set(TokenizerCfg.model_fields.keys())


def _normalize_data(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        return {}
    data = dict(data)
    flat = {k: data.pop(k) for k in list(data.keys()) if k in _FLAT_KEYS}
    if flat:
        section = dict(data.get("tokenizer") or {})
        section.update(flat)
        data["tokenizer"] = section
    return data


def load_config(path: str | Path | None = "configs/default.yaml") -> Config:
    """Read a YAML config. A missing file yields the defaults."""
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
        else:
            _LOGGER.debug("config %s not found; using defaults", path)
    data = _normalize_data(data)
    return Config(**data)


def _cast_env_value(val: str, current: Any) -> Any:
    """
    Cast env string to the type of `current` when possible.
    Fallback order: bool -> int -> str.
    """
    s = str(val).strip().lower()
    if isinstance(current, bool):
        return s in ("1", "true", "yes", "y", "on")
    try:
        return int(val)
    except ValueError:
        pass
    if s in ("1", "true", "yes", "y", "on"):
        return True
    if s in ("0", "false", "no", "n", "off"):
        return False
    return val


def apply_env_overrides(cfg: Config) -> None:
    """
    Override tokenizer knobs from environment variables.
    Supported:
      WORDTOK_MIN_CHARS   minimum token length in codepoints
      WORDTOK_MAX_CHARS   maximum token length in codepoints
      WORDTOK_FILTER_JUNK 1/true/yes to drop junk word tokens
    Invalid values are ignored.
    """
    mapping = {
        "WORDTOK_MIN_CHARS": "min_token_char_count",
        "WORDTOK_MAX_CHARS": "max_token_char_count",
        "WORDTOK_FILTER_JUNK": "filter_junk",
    }
    for env_key, field in mapping.items():
        raw = os.getenv(env_key)
        if raw is None:
            continue
        current = getattr(cfg.tokenizer, field)
        try:
            setattr(cfg.tokenizer, field, _cast_env_value(raw, current))
        except ValidationError as e:
            _LOGGER.debug("ignoring %s=%r: %s", env_key, raw, e)
