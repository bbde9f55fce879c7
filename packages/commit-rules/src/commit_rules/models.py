from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any


class Severity(IntEnum):
    DISABLED = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class RuleSetting:
    """Severity of a rule plus the options the engine passes to it"""

    severity: Severity
    options: tuple[Any, ...] = ()

    # Options may hold lists
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "severity", Severity(self.severity))
        # Options are meaningless once a rule is off
        if self.severity is Severity.DISABLED:
            object.__setattr__(self, "options", ())
        else:
            object.__setattr__(self, "options", tuple(_as_lists(option) for option in self.options))

    @property
    def enabled(self) -> bool:
        return self.severity is not Severity.DISABLED

    @classmethod
    def from_value(cls, value: Sequence[Any]) -> "RuleSetting":
        """Build a setting from the config-file form ``[level, *options]``"""
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or not value:
            raise ValueError(f"Rule value must be a non-empty list, got {value!r}")

        level = value[0]
        if isinstance(level, bool) or level not in (0, 1, 2):
            raise ValueError(f"Rule severity must be 0, 1 or 2, got {level!r}")

        return cls(Severity(level), tuple(value[1:]))

    def to_value(self) -> list[Any]:
        return [int(self.severity), *self.options]


@dataclass(frozen=True)
class RuleSet:
    """A named collection of rule settings, resolved by name"""

    name: str
    rules: Mapping[str, RuleSetting] = field(default_factory=dict)
    extends: tuple[str, ...] = ()

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        object.__setattr__(self, "extends", tuple(self.extends))


def _as_lists(value: Any) -> Any:
    """Nested sequences become lists, the shape they take after a JSON or TOML round trip"""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return value
    return [_as_lists(item) for item in value]
