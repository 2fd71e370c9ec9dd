"""HintFile model - a candidate file for code hint analysis"""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List


@dataclass
class HintFile:
    """Represents a file the hinting engine may analyze"""

    path: str  # Path relative to the project root
    size: int = 0  # Size in bytes

    @property
    def normalized_path(self) -> str:
        """Path with forward slashes"""
        return self.path.replace("\\", "/")

    @property
    def name(self) -> str:
        """File name without directories"""
        return PurePosixPath(self.normalized_path).name

    @property
    def directories(self) -> List[str]:
        """Directory components leading to the file"""
        return [part for part in PurePosixPath(self.normalized_path).parent.parts if part not in ("/", ".")]
