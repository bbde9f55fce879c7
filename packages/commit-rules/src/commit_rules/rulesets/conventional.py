from ..models import RuleSet, RuleSetting, Severity

CONVENTIONAL_TYPES = [
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
]

CONFIG_CONVENTIONAL = RuleSet(
    name="@commitlint/config-conventional",
    rules={
        "body-leading-blank": RuleSetting(Severity.WARNING, ("always",)),
        "body-max-line-length": RuleSetting(Severity.ERROR, ("always", 100)),
        "footer-leading-blank": RuleSetting(Severity.WARNING, ("always",)),
        "footer-max-line-length": RuleSetting(Severity.ERROR, ("always", 100)),
        "header-max-length": RuleSetting(Severity.ERROR, ("always", 100)),
        "header-trim": RuleSetting(Severity.ERROR, ("always",)),
        "subject-case": RuleSetting(
            Severity.ERROR,
            ("never", ["sentence-case", "start-case", "pascal-case", "upper-case"]),
        ),
        "subject-empty": RuleSetting(Severity.ERROR, ("never",)),
        "subject-full-stop": RuleSetting(Severity.ERROR, ("never", ".")),
        "type-case": RuleSetting(Severity.ERROR, ("always", "lower-case")),
        "type-empty": RuleSetting(Severity.ERROR, ("never",)),
        "type-enum": RuleSetting(Severity.ERROR, ("always", CONVENTIONAL_TYPES)),
    },
)
