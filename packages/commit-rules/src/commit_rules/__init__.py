from .models import RuleSet, RuleSetting, Severity
from .registry import RuleSetRegistry, registry

__all__ = ["RuleSet", "RuleSetRegistry", "RuleSetting", "Severity", "registry"]
