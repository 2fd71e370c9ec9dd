"""Compiled code hint preferences."""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from jscodehints.domain.preferences.compiler import settings_to_matcher
from jscodehints.domain.preferences.matcher import PatternMatcher
from jscodehints.domain.preferences.raw import RawPreferences

logger = logging.getLogger(__name__)

# No directories are excluded unless the user asks for it
DEFAULT_EXCLUDED_DIRECTORIES: Optional[PatternMatcher] = None

# require and jquery have dedicated hint support; less*.min.js destabilizes the analyzer
DEFAULT_EXCLUDED_FILES = PatternMatcher(r"^require.*\.js$|^jquery.*\.js$|^less.*\.min\.js$")

DEFAULT_MAX_FILE_COUNT = 100
DEFAULT_MAX_FILE_SIZE = 512 * 1024


class Preferences(BaseModel):
    """Matching rules and limits for the file hinting pipeline.

    Instances are immutable. Build them with ``from_raw`` from the parsed
    contents of a ``.jscodehints`` file; constructing one with no arguments
    gives the built-in defaults.

    Attributes:
        excluded_directories: Matcher for excluded directory names (None = none excluded)
        excluded_files: Matcher for excluded file names, always includes the built-in list
        max_file_count: Maximum number of files analyzed
        max_file_size: Files larger than this many bytes are not parsed
    """

    FILE_NAME: ClassVar[str] = ".jscodehints"

    excluded_directories: Optional[PatternMatcher] = DEFAULT_EXCLUDED_DIRECTORIES
    excluded_files: PatternMatcher = DEFAULT_EXCLUDED_FILES
    max_file_count: int = Field(DEFAULT_MAX_FILE_COUNT, gt=0)
    max_file_size: int = Field(DEFAULT_MAX_FILE_SIZE, gt=0)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    @classmethod
    def from_raw(cls, prefs: Any = None) -> "Preferences":
        """Build preferences from a parsed preferences object

        Never raises: anything missing or invalid falls back to its default.

        Args:
            prefs: Parsed JSON object (None or a non-mapping means defaults)

        Returns:
            Fully defaulted Preferences
        """
        if not prefs or not isinstance(prefs, Mapping):
            logger.debug("No preferences supplied, using defaults")
            return cls()

        raw = RawPreferences.model_validate(dict(prefs))

        return cls(
            excluded_directories=settings_to_matcher(
                raw.excluded_directories, DEFAULT_EXCLUDED_DIRECTORIES
            ),
            excluded_files=settings_to_matcher(raw.excluded_files, DEFAULT_EXCLUDED_FILES),
            max_file_count=raw.max_file_count or DEFAULT_MAX_FILE_COUNT,
            max_file_size=raw.max_file_size or DEFAULT_MAX_FILE_SIZE,
        )

    def get_excluded_directories(self) -> Optional[PatternMatcher]:
        """Get the matcher for excluded directories

        Returns:
            Matcher for directory names, or None if no directories are excluded
        """
        return self.excluded_directories

    def get_excluded_files(self) -> PatternMatcher:
        """Get the matcher for excluded files

        Returns:
            Matcher for file names
        """
        return self.excluded_files

    def get_max_file_count(self) -> int:
        """Get the maximum number of files that will be analyzed"""
        return self.max_file_count

    def get_max_file_size(self) -> int:
        """Get the maximum size in bytes of a file that will be analyzed"""
        return self.max_file_size


def build_preferences(prefs: Any = None) -> Preferences:
    """Build Preferences from a parsed .jscodehints object (see Preferences.from_raw)"""
    return Preferences.from_raw(prefs)
