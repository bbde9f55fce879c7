import re
from collections.abc import Callable, Mapping
from typing import Any

IgnorePredicate = Callable[[str], bool]

RELEASE_CHORE_PREFIX = "chore(release)"


class PrefixIgnore:
    """Skip commits whose raw message starts with a literal prefix (case-sensitive)"""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def __call__(self, message: str) -> bool:
        return message.startswith(self.prefix)

    def to_spec(self) -> dict[str, str]:
        return {"prefix": self.prefix}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrefixIgnore) and other.prefix == self.prefix

    def __hash__(self) -> int:
        return hash((PrefixIgnore, self.prefix))

    def __repr__(self) -> str:
        return f"PrefixIgnore({self.prefix!r})"


class RegexIgnore:
    """Skip commits whose raw message matches a regular expression at position 0"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def __call__(self, message: str) -> bool:
        return self._regex.match(message) is not None

    def to_spec(self) -> dict[str, str]:
        return {"regex": self.pattern}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegexIgnore) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash((RegexIgnore, self.pattern))

    def __repr__(self) -> str:
        return f"RegexIgnore({self.pattern!r})"


is_release_chore = PrefixIgnore(RELEASE_CHORE_PREFIX)


def predicate_from_spec(spec: Mapping[str, Any]) -> IgnorePredicate:
    """Inverse of ``to_spec``: ``{"prefix": ...}`` or ``{"regex": ...}``"""
    keys = set(spec)
    if keys == {"prefix"} and isinstance(spec["prefix"], str):
        return PrefixIgnore(spec["prefix"])
    if keys == {"regex"} and isinstance(spec["regex"], str):
        try:
            return RegexIgnore(spec["regex"])
        except re.error as e:
            raise ValueError(f"Invalid ignore regex {spec['regex']!r}: {e}") from e
    raise ValueError(f"Ignore entry must have exactly one of 'prefix' or 'regex', got {dict(spec)!r}")
