import logging

from commit_rules import RuleSetRegistry, RuleSetting, Severity, registry as default_registry

from .config import LintConfiguration
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_rules(
    config: LintConfiguration, registry: RuleSetRegistry | None = None
) -> dict[str, RuleSetting]:
    """Merge extended rule-sets in order, then apply the configuration's overrides"""
    registry = registry if registry is not None else default_registry
    merged: dict[str, RuleSetting] = {}

    for name in config.extends:
        _merge_rule_set(name, registry, merged, stack=[])

    for rule_name, setting in config.rules.items():
        if rule_name not in merged:
            logger.debug("Override for unknown rule '%s' has no effect", rule_name)
        merged[rule_name] = setting

    return merged


def enabled_rules(
    config: LintConfiguration, registry: RuleSetRegistry | None = None
) -> dict[str, RuleSetting]:
    return {
        name: setting
        for name, setting in resolve_rules(config, registry).items()
        if setting.severity is not Severity.DISABLED
    }


def _merge_rule_set(
    name: str, registry: RuleSetRegistry, merged: dict[str, RuleSetting], stack: list[str]
):
    if name in stack:
        cycle = " -> ".join([*stack, name])
        raise ConfigurationError(f"Rule-set extends itself: {cycle}", source=name)
    if name not in registry:
        raise ConfigurationError(
            f"Unknown rule-set (known: {', '.join(registry.names()) or 'none'})", source=name
        )

    rule_set = registry.get(name)
    stack.append(name)
    for parent in rule_set.extends:
        _merge_rule_set(parent, registry, merged, stack)
    stack.pop()

    logger.debug("Merging %d rules from '%s'", len(rule_set.rules), name)
    merged.update(rule_set.rules)
