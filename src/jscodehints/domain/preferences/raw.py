"""Raw preferences record as parsed from a .jscodehints file"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawPreferences(BaseModel):
    """User preferences before compilation.

    Malformed values are dropped to None instead of failing validation, so
    any mapping can be turned into a RawPreferences.

    Attributes:
        excluded_directories: Directory name patterns (``excluded-directories``)
        excluded_files: File name patterns (``excluded-files``)
        max_file_count: Cap on files processed (``max-file-count``)
        max_file_size: Cap on bytes per file (``max-file-size``)
    """

    excluded_directories: Optional[List[Any]] = Field(None, alias="excluded-directories")
    excluded_files: Optional[List[Any]] = Field(None, alias="excluded-files")
    max_file_count: Optional[int] = Field(None, alias="max-file-count")
    max_file_size: Optional[int] = Field(None, alias="max-file-size")

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        json_schema_extra={
            "example": {
                "excluded-directories": ["/ex[\\w]*ed/"],
                "excluded-files": ["require.js", "jquery*.js", "less*.min.js", "d2?.js", "d3*"],
                "max-file-count": 100,
                "max-file-size": 524288,
            }
        },
    )

    @field_validator("excluded_directories", "excluded_files", mode="before")
    @classmethod
    def _drop_non_sequences(cls, value: Any) -> Optional[List[Any]]:
        if isinstance(value, (list, tuple)):
            return list(value)
        return None

    @field_validator("max_file_count", "max_file_size", mode="before")
    @classmethod
    def _drop_non_positive(cls, value: Any) -> Optional[int]:
        # bool is an int subclass but never a meaningful limit
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if isinstance(value, float) and not math.isfinite(value):
            return None
        value = int(value)
        return value if value > 0 else None
