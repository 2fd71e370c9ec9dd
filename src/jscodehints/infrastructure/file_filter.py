"""File filtering for code hint analysis"""

import logging
from typing import Iterable, List, Optional

from jscodehints.domain.models.hint_file import HintFile
from jscodehints.domain.preferences import Preferences

logger = logging.getLogger(__name__)


class HintFileFilter:
    """Filter for candidate files based on code hint preferences"""

    def __init__(self, preferences: Optional[Preferences] = None):
        """Initialize file filter

        Args:
            preferences: Preferences to apply (defaults if None)
        """
        self.preferences = preferences or Preferences()

    def should_exclude_directory(self, path: str) -> tuple[bool, str]:
        """Check if any directory in a path is excluded

        Args:
            path: Directory path (forward or back slashes)

        Returns:
            Tuple of (should_exclude, reason)
        """
        directories = [part for part in path.replace("\\", "/").split("/") if part and part != "."]
        return self._check_directories(directories)

    def _check_directories(self, directories: List[str]) -> tuple[bool, str]:
        matcher = self.preferences.get_excluded_directories()
        if matcher is None:
            return False, ""

        for directory in directories:
            if matcher.matches(directory):
                return True, f"excluded directory: {directory}"
        return False, ""

    def should_exclude_file(self, hint_file: HintFile) -> tuple[bool, str]:
        """Check if file should be excluded

        Args:
            hint_file: File to check

        Returns:
            Tuple of (should_exclude, reason)
        """
        excluded, reason = self._check_directories(hint_file.directories)
        if excluded:
            return True, reason

        if self.preferences.get_excluded_files().matches(hint_file.name):
            return True, f"excluded file: {hint_file.name}"

        max_size = self.preferences.get_max_file_size()
        if hint_file.size > max_size:
            return True, f"file too large: {hint_file.size} > {max_size} bytes"

        return False, ""

    def filter_files(
        self, files: Iterable[HintFile]
    ) -> tuple[List[HintFile], List[tuple[HintFile, str]]]:
        """Filter candidate files, keeping at most max_file_count of them

        Args:
            files: Candidate files in processing order

        Returns:
            Tuple of (accepted_files, excluded_files_with_reasons)
        """
        max_count = self.preferences.get_max_file_count()
        accepted = []
        excluded = []

        for hint_file in files:
            if len(accepted) >= max_count:
                excluded.append((hint_file, "max file count reached"))
                continue

            should_exclude, reason = self.should_exclude_file(hint_file)
            if should_exclude:
                excluded.append((hint_file, reason))
                logger.debug(f"Excluding {hint_file.path}: {reason}")
            else:
                accepted.append(hint_file)

        if excluded:
            logger.info(f"Excluded {len(excluded)} files, {len(accepted)} files remaining")

        return accepted, excluded
