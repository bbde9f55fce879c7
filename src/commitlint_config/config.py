"""The project's commit lint policy and the record type that carries it."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from commit_rules import RuleSetting, Severity

from .errors import ConfigurationError
from .ignores import IgnorePredicate, is_release_chore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintConfiguration:
    """Rule-sets to extend, commits to skip, and rule overrides.

    Read by the linting engine once at startup. Apart from calling the
    ``ignores`` predicates, the engine never invokes anything on it.
    """

    extends: tuple[str, ...] = ()
    ignores: tuple[IgnorePredicate, ...] = ()
    rules: Mapping[str, RuleSetting] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "extends", tuple(self.extends))
        object.__setattr__(self, "ignores", tuple(self.ignores))
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def should_ignore(self, message: str) -> bool:
        """True if any ignore predicate exempts this commit message from linting"""
        for predicate in self.ignores:
            try:
                if predicate(message):
                    logger.debug("Commit ignored by %r", predicate)
                    return True
            except Exception as e:
                raise ConfigurationError(f"Ignore predicate {predicate!r} raised {e!r}") from e
        return False


CONFIG = LintConfiguration(
    extends=("@commitlint/config-conventional",),
    ignores=(is_release_chore,),
    rules={"body-max-line-length": RuleSetting(Severity.DISABLED)},
)
