from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class IgnoreSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prefix: str | None = None
    regex: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "IgnoreSpec":
        if (self.prefix is None) == (self.regex is None):
            raise ValueError("ignore entry needs exactly one of 'prefix' or 'regex'")
        return self


class LintConfigFile(BaseModel):
    """On-disk form of a commit lint configuration"""

    model_config = ConfigDict(extra="forbid")

    extends: list[str] = Field(default_factory=list)
    ignores: list[IgnoreSpec] = Field(default_factory=list)
    rules: dict[str, list[Any]] = Field(default_factory=dict)
