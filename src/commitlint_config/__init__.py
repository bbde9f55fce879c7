from .config import CONFIG, LintConfiguration
from .errors import ConfigurationError
from .ignores import PrefixIgnore, RegexIgnore, is_release_chore
from .loader import dump_config, dumps_config, load_config
from .resolver import enabled_rules, resolve_rules

__all__ = [
    "CONFIG",
    "ConfigurationError",
    "LintConfiguration",
    "PrefixIgnore",
    "RegexIgnore",
    "dump_config",
    "dumps_config",
    "enabled_rules",
    "is_release_chore",
    "load_config",
    "resolve_rules",
]
