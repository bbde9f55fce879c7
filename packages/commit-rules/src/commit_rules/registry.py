from .models import RuleSet


class RuleSetRegistry:
    """Registry for named rule-sets that configurations can extend"""

    def __init__(self):
        self._rule_sets: dict[str, RuleSet] = {}
        self._load_builtin_rule_sets()

    def register(self, rule_set: RuleSet):
        self._rule_sets[rule_set.name] = rule_set

    def get(self, name: str) -> RuleSet:
        return self._rule_sets[name]

    def names(self) -> list[str]:
        return sorted(self._rule_sets)

    def __contains__(self, name: object) -> bool:
        return name in self._rule_sets

    def _load_builtin_rule_sets(self):
        from .rulesets.conventional import CONFIG_CONVENTIONAL

        self.register(CONFIG_CONVENTIONAL)


registry = RuleSetRegistry()
