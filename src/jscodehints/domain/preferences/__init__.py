"""Code hint preferences: pattern compilation and defaulting."""

from jscodehints.domain.preferences.compiler import (
    is_regex_pattern,
    settings_to_matcher,
    wildcard_to_regex,
)
from jscodehints.domain.preferences.matcher import PatternMatcher
from jscodehints.domain.preferences.raw import RawPreferences
from jscodehints.domain.preferences.settings import (
    DEFAULT_EXCLUDED_DIRECTORIES,
    DEFAULT_EXCLUDED_FILES,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    Preferences,
    build_preferences,
)

__all__ = [
    "PatternMatcher",
    "RawPreferences",
    "Preferences",
    "build_preferences",
    "settings_to_matcher",
    "wildcard_to_regex",
    "is_regex_pattern",
    "DEFAULT_EXCLUDED_DIRECTORIES",
    "DEFAULT_EXCLUDED_FILES",
    "DEFAULT_MAX_FILE_COUNT",
    "DEFAULT_MAX_FILE_SIZE",
]
