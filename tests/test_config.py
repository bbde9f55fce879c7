from collections.abc import Hashable

import pytest
from commit_rules import RuleSetting, Severity
from commitlint_config import CONFIG, ConfigurationError, LintConfiguration, is_release_chore


def test_project_config():
    assert CONFIG.extends == ("@commitlint/config-conventional",)
    assert CONFIG.ignores == (is_release_chore,)
    assert dict(CONFIG.rules) == {"body-max-line-length": RuleSetting(Severity.DISABLED)}


def test_release_commit_is_skipped():
    assert CONFIG.should_ignore("chore(release): 1.2.3")


def test_feature_commit_is_linted():
    assert not CONFIG.should_ignore("feat: add login flow")
    assert not CONFIG.should_ignore("")


def test_any_predicate_ignores():
    config = LintConfiguration(ignores=[lambda m: m.startswith("wip"), is_release_chore])

    assert config.should_ignore("wip: half done")
    assert config.should_ignore("chore(release): 0.1.0")
    assert not config.should_ignore("fix: done")


def test_raising_predicate_is_configuration_error():
    def broken(message):
        raise RuntimeError("boom")

    config = LintConfiguration(ignores=[broken])

    with pytest.raises(ConfigurationError, match="boom"):
        config.should_ignore("feat: x")


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        CONFIG.extends = ()
    with pytest.raises(TypeError):
        CONFIG.rules["body-max-line-length"] = RuleSetting(Severity.ERROR)


def test_config_is_not_hashable():
    assert not isinstance(CONFIG, Hashable)
