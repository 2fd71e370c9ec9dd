"""Conversion of wildcard and raw pattern lists into a single matcher

Strings delimited by ``/`` on both ends are raw regular expressions and are
used verbatim once the delimiters are stripped. Any other string is a
wildcard literal where ``*`` matches any sequence and ``?`` matches at most
one character; everything else matches literally.
"""

import logging
import re
import warnings
from typing import Any, List, Optional

from jscodehints.domain.preferences.matcher import PatternMatcher

logger = logging.getLogger(__name__)

REGEX_DELIMITER = "/"

# re raises more than re.error for huge repeat counts and deep nesting.
# Misplaced global flags only warn before Python 3.11.
REGEX_COMPILE_ERRORS = (re.error, OverflowError, RecursionError, DeprecationWarning)


def is_regex_pattern(value: str) -> bool:
    """Check if a pattern string is a raw regular expression (``/.../``)

    A lone ``/`` counts as a raw pattern with an empty body.
    """
    return bool(value) and value.startswith(REGEX_DELIMITER) and value.endswith(REGEX_DELIMITER)


def wildcard_to_regex(pattern: str) -> str:
    """Convert a wildcard literal to regular expression source

    Args:
        pattern: Name pattern with optional ``*`` and ``?`` wildcards

    Returns:
        Unanchored regular expression source
    """
    escaped = re.escape(pattern)
    # re.escape leaves "*" and "?" as "\*" and "\?", so these are the wildcards
    return escaped.replace(r"\*", ".*").replace(r"\?", ".?")


def _to_fragment(value: str) -> Optional[str]:
    """Turn one pattern string into an anchored fragment

    Returns None for a raw pattern that does not compile on its own. Global
    inline flags such as ``(?i)`` are rejected too, since they would apply to
    every other pattern once joined; scoped flags like ``(?i:foo)`` work.
    """
    if not is_regex_pattern(value):
        return f"^(?:{wildcard_to_regex(value)})$"

    fragment = f"^(?:{value[1:-1]})$"
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            re.compile(fragment)
    except REGEX_COMPILE_ERRORS as e:
        logger.warning(f"Ignoring invalid regular expression {value!r}: {type(e).__name__}: {e}")
        return None
    return fragment


def settings_to_matcher(
    settings: Any,
    default: Optional[PatternMatcher] = None,
) -> Optional[PatternMatcher]:
    """Compile a list of name patterns into one matcher

    User patterns are kept in order and the default matcher, when given, is
    appended last as a raw pattern, so built-in exclusions can never be
    overridden.

    Args:
        settings: List of pattern strings (anything else means no settings)
        default: Built-in matcher to union with the user patterns

    Returns:
        Combined matcher, ``default`` itself when no usable user pattern
        exists, or None when there is neither
    """
    if not isinstance(settings, (list, tuple)) or not settings:
        return default

    fragments: List[str] = []
    for value in settings:
        if not isinstance(value, str):
            logger.debug(f"Skipping non-string pattern: {value!r}")
            continue
        fragment = _to_fragment(value)
        if fragment is not None:
            fragments.append(fragment)

    if not fragments:
        return default

    if default is not None:
        fragments.append(_to_fragment(f"{REGEX_DELIMITER}{default.source}{REGEX_DELIMITER}"))

    source = "|".join(fragments)
    try:
        return PatternMatcher(source)
    except REGEX_COMPILE_ERRORS as e:
        # Fragments compile alone but may clash once joined (group references)
        logger.warning(f"Ignoring excluded patterns {list(settings)!r}: {type(e).__name__}: {e}")
        return default
