"""Include/exclude pattern matching for component names."""

import re
from typing import Any


def matches(pattern: Any, name: str) -> bool:
    """
    Check whether a component name satisfies a filter pattern.

    Args:
        pattern: List/tuple of names, comma-delimited string, or compiled regex
        name: Component name to test

    Returns:
        True if the name matches; False for any unsupported pattern shape

    Examples:
        >>> matches(["a", "b"], "a")
        True
        >>> matches("a,b", "c")
        False
        >>> matches(re.compile(r"^x"), "xyz")
        True
    """
    if isinstance(pattern, (list, tuple)):
        return name in pattern
    elif isinstance(pattern, str):
        return name in pattern.split(",")
    elif isinstance(pattern, re.Pattern):
        return pattern.search(name) is not None
    return False


def _is_set(pattern: Any) -> bool:
    """None and the empty string both mean "no filter"."""
    return pattern is not None and not (isinstance(pattern, str) and pattern == "")


def is_cacheable(name: str | None, include: Any = None, exclude: Any = None) -> bool:
    """
    Decide whether a component name is eligible for caching.

    An include filter rejects unnamed components; an exclude filter only
    rejects names it matches. An empty string disables either filter, while
    an empty list is still a filter that matches nothing.
    """
    if _is_set(include) and (not name or not matches(include, name)):
        return False
    if _is_set(exclude) and name and matches(exclude, name):
        return False
    return True


__all__ = ["matches", "is_cacheable"]
