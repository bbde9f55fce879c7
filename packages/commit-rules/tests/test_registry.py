from collections.abc import Hashable

import pytest
from commit_rules import RuleSet, RuleSetRegistry, RuleSetting, Severity, registry


def test_builtin_conventional_rule_set_loaded():
    assert "@commitlint/config-conventional" in registry
    rule_set = registry.get("@commitlint/config-conventional")

    assert rule_set.rules["body-max-line-length"] == RuleSetting(Severity.ERROR, ("always", 100))
    assert rule_set.rules["body-leading-blank"].severity == Severity.WARNING
    assert "feat" in rule_set.rules["type-enum"].options[1]


def test_register_custom_rule_set():
    reg = RuleSetRegistry()
    reg.register(RuleSet(name="team", rules={"header-max-length": RuleSetting(Severity.ERROR, ("always", 72))}))

    assert reg.get("team").rules["header-max-length"].options == ("always", 72)
    assert reg.names() == ["@commitlint/config-conventional", "team"]


def test_unknown_rule_set_raises_key_error():
    with pytest.raises(KeyError):
        RuleSetRegistry().get("@commitlint/config-missing")


def test_rule_set_rules_are_read_only():
    rule_set = registry.get("@commitlint/config-conventional")
    with pytest.raises(TypeError):
        rule_set.rules["type-empty"] = RuleSetting(Severity.DISABLED)


@pytest.mark.parametrize(
    "value, expected",
    [
        ([0], RuleSetting(Severity.DISABLED)),
        ([1, "always"], RuleSetting(Severity.WARNING, ("always",))),
        ((2, "always", 100), RuleSetting(Severity.ERROR, ("always", 100))),
    ],
)
def test_rule_setting_from_value(value, expected):
    assert RuleSetting.from_value(value) == expected


@pytest.mark.parametrize("value", [[], [3], [-1], ["2"], [True], "2", 2, None])
def test_rule_setting_from_value_rejects_bad_input(value):
    with pytest.raises(ValueError):
        RuleSetting.from_value(value)


def test_disabled_setting_drops_options():
    setting = RuleSetting.from_value([0, "always", 100])

    assert setting.options == ()
    assert not setting.enabled
    assert setting.to_value() == [0]


def test_rule_setting_to_value():
    assert RuleSetting(Severity.ERROR, ("always", 100)).to_value() == [2, "always", 100]


def test_nested_options_normalised_to_lists():
    setting = RuleSetting(Severity.ERROR, ("always", ("feat", ("fix", "docs"))))

    assert setting.options == ("always", ["feat", ["fix", "docs"]])
    assert setting == RuleSetting.from_value([2, "always", ["feat", ["fix", "docs"]]])


def test_models_are_not_hashable():
    assert not isinstance(RuleSetting(Severity.ERROR, ("always", 100)), Hashable)
    assert not isinstance(registry.get("@commitlint/config-conventional"), Hashable)
