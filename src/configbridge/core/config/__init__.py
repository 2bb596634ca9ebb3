"""Config document persistence and typed flag/setting access."""

from .codec import (
    FeatureKey,
    Personality,
    normalize_personality,
    read_flag,
    read_personality,
    read_top_level_string,
    set_top_level_string,
    write_flag,
    write_personality,
)
from .document import config_file_path, load, parse_document, persist
from .home import resolve_default_config_home

__all__ = [
    "FeatureKey",
    "Personality",
    "config_file_path",
    "load",
    "normalize_personality",
    "parse_document",
    "persist",
    "read_flag",
    "read_personality",
    "read_top_level_string",
    "resolve_default_config_home",
    "set_top_level_string",
    "write_flag",
    "write_personality",
]
