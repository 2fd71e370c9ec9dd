"""Preferences loader for .jscodehints files"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from jscodehints.domain.preferences import Preferences

logger = logging.getLogger(__name__)

PREFERENCES_FILE_ENV = "JSCODEHINTS_FILE"


class PreferencesLoader:
    """Loads code hint preferences from a .jscodehints file

    Preferences file lookup order:
    1. Explicit preferences_path argument
    2. JSCODEHINTS_FILE environment variable
    3. .jscodehints in project_root (current directory if None) or its parents

    A missing, unreadable or malformed file gives the default preferences.
    """

    def __init__(
        self,
        preferences_path: Optional[Union[str, Path]] = None,
        project_root: Optional[Union[str, Path]] = None,
    ):
        """Initialize preferences loader

        Args:
            preferences_path: Path to the preferences file (searched if None)
            project_root: Directory to start the search from
        """
        if isinstance(preferences_path, str):
            preferences_path = Path(preferences_path)
        if isinstance(project_root, str):
            project_root = Path(project_root)
        self.project_root = project_root or Path.cwd()
        self.preferences_path = preferences_path or self._find_preferences_file()
        self.preferences: Preferences = self._load_preferences()

    def _find_preferences_file(self) -> Optional[Path]:
        """Find the preferences file from the environment or by searching upwards

        Returns:
            Path to preferences file or None if not found
        """
        env_path = os.getenv(PREFERENCES_FILE_ENV)
        if env_path:
            logger.debug(f"Using preferences file from {PREFERENCES_FILE_ENV}: {env_path}")
            return Path(env_path)

        for parent in [self.project_root] + list(self.project_root.parents):
            preferences_file = parent / Preferences.FILE_NAME
            if preferences_file.is_file():
                logger.info(f"Found preferences file: {preferences_file}")
                return preferences_file
        logger.debug(f"No {Preferences.FILE_NAME} found, using defaults")
        return None

    def _read_json(self) -> Any:
        """Read the preferences file as JSON

        Returns:
            Parsed JSON value, or None if the file is missing or invalid
        """
        if not self.preferences_path or not self.preferences_path.is_file():
            return None

        try:
            with open(self.preferences_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load preferences from {self.preferences_path}: {e}")
            logger.info("Using default preferences")
            return None

        if not isinstance(data, dict):
            logger.warning(
                f"Preferences in {self.preferences_path} must be a JSON object, "
                f"got {type(data).__name__}"
            )
            return None

        logger.info(f"Loaded preferences from {self.preferences_path}")
        return data

    def _load_preferences(self) -> Preferences:
        """Load the preferences file and build preferences from it

        Returns:
            Preferences built from the file, or defaults
        """
        return Preferences.from_raw(self._read_json())

    def reload(self) -> Preferences:
        """Re-read the preferences file

        Returns:
            Newly built preferences
        """
        self.preferences = self._load_preferences()
        return self.preferences

    def get_preferences(self) -> Preferences:
        """Get loaded preferences

        Returns:
            Preferences model
        """
        return self.preferences
