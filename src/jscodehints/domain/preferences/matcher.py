"""PatternMatcher - compiled predicate over directory and file names"""

import re


class PatternMatcher:
    """Whole-string matcher built from a regular expression source

    Two matchers with the same source behave identically, so equality
    compares the source only.
    """

    __slots__ = ("_source", "_regex")

    def __init__(self, source: str):
        """Compile the matcher

        Args:
            source: Regular expression source

        Raises:
            re.error: If the source does not compile
        """
        self._source = source
        self._regex = re.compile(source)

    @property
    def source(self) -> str:
        """Regular expression source"""
        return self._source

    def matches(self, name: str) -> bool:
        """Check if the entire name matches

        Args:
            name: Directory or file name to test

        Returns:
            True if the name matches one of the alternatives
        """
        return self._regex.fullmatch(name) is not None

    def __call__(self, name: str) -> bool:
        return self.matches(name)

    # Immutable, so copies are the matcher itself
    def __copy__(self) -> "PatternMatcher":
        return self

    def __deepcopy__(self, memo: dict) -> "PatternMatcher":
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternMatcher):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)

    def __repr__(self) -> str:
        return f"PatternMatcher({self._source!r})"
