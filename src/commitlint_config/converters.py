from commit_rules import RuleSetting

from .config import LintConfiguration
from .errors import ConfigurationError
from .ignores import predicate_from_spec
from .models import IgnoreSpec, LintConfigFile


def config_file_to_configuration(model: LintConfigFile) -> LintConfiguration:
    """Convert the external Pydantic file model to the internal configuration record"""
    try:
        ignores = [predicate_from_spec(spec.model_dump(exclude_none=True)) for spec in model.ignores]
        rules = {name: RuleSetting.from_value(value) for name, value in model.rules.items()}
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    return LintConfiguration(extends=model.extends, ignores=ignores, rules=rules)


def configuration_to_config_file(config: LintConfiguration) -> LintConfigFile:
    ignores = []
    for predicate in config.ignores:
        to_spec = getattr(predicate, "to_spec", None)
        if to_spec is None:
            raise ConfigurationError(f"Ignore predicate {predicate!r} cannot be written to a file")
        ignores.append(IgnoreSpec(**to_spec()))

    return LintConfigFile(
        extends=list(config.extends),
        ignores=ignores,
        rules={name: setting.to_value() for name, setting in config.rules.items()},
    )
