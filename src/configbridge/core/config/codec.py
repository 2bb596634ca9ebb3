"""Typed accessors over a loaded config document.

Feature flags are top-level booleans keyed by free-form names; the
personality setting is a top-level string restricted to a closed set.
Reads never raise: anything missing or of the wrong type reads as None.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from tomlkit import TOMLDocument

from configbridge.errors import ValidationError

PERSONALITY_KEY = "personality"
MODEL_KEY = "model"

DEPRECATED_FEATURE_KEYS = {"collab": "multi_agent"}


class Personality(str, Enum):
    FRIENDLY = "friendly"
    PRAGMATIC = "pragmatic"


class FeatureKey(str):
    """A feature flag name that passed write-boundary validation."""

    @classmethod
    def parse(cls, raw: str) -> "FeatureKey":
        key = (raw or "").strip()
        if not key:
            raise ValidationError("feature key is empty")
        replacement = DEPRECATED_FEATURE_KEYS.get(key.lower())
        if replacement is not None:
            raise ValidationError(
                f"feature key `{key.lower()}` is no longer supported; use `{replacement}`"
            )
        return cls(key)


def _plain(value: Any) -> Any:
    # tomlkit items wrap python values; compare on the unwrapped form
    unwrap = getattr(value, "unwrap", None)
    return unwrap() if callable(unwrap) else value


def read_top_level_string(document: TOMLDocument, key: str) -> str | None:
    value = _plain(document.get(key))
    return value if isinstance(value, str) else None


def set_top_level_string(document: TOMLDocument, key: str, value: str | None) -> None:
    """Set a top-level string, or remove the key when value is None."""
    if value is None:
        if key in document:
            del document[key]
        return
    document[key] = value


def read_flag(document: TOMLDocument, key: str) -> bool | None:
    value = _plain(document.get(key))
    return value if isinstance(value, bool) else None


def write_flag(document: TOMLDocument, key: str, value: bool) -> FeatureKey:
    """
    Set a feature flag, preserving every other entry.

    Raises:
        ValidationError: empty key, or a deprecated key such as ``collab``
    """
    feature_key = FeatureKey.parse(key)
    document[str(feature_key)] = bool(value)
    return feature_key


def normalize_personality(raw: str | None) -> Personality | None:
    if raw is None:
        return None
    try:
        return Personality(raw.strip().lower())
    except ValueError:
        return None


def read_personality(document: TOMLDocument) -> Personality | None:
    return normalize_personality(read_top_level_string(document, PERSONALITY_KEY))


def write_personality(document: TOMLDocument, raw: str) -> bool:
    """
    Store the canonical form of ``raw`` under ``personality``.

    Unrecognized values leave the document untouched. Returns whether the
    document was changed.
    """
    personality = normalize_personality(raw)
    if personality is None:
        return False
    set_top_level_string(document, PERSONALITY_KEY, personality.value)
    return True
