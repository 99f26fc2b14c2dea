"""Configuration management for langsplit reports."""

import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

FILTER_ENV = "LANGSPLIT_FILTER"
NO_COLOR_ENV = "NO_COLOR"


class ReportOptions(BaseModel):
    """Options that shape a report run.

    The filter is compiled during validation, so a malformed pattern fails
    here, before any scanning happens.
    """

    breakdown: bool = Field(
        default=False,
        description="Print the language detected for each file"
    )
    strategies: bool = Field(
        default=False,
        description="Print each detection strategy and the files it decided"
    )
    condensed: bool = Field(
        default=False,
        description="Only print group headers and counts in the breakdowns"
    )
    filter: re.Pattern[str] | None = Field(
        default=None,
        description="Regex restricting which breakdown groups are printed"
    )
    color: bool = Field(
        default=True,
        description="Style the output when the terminal supports it"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("filter", mode="before")
    @classmethod
    def compile_filter(cls, v: Any) -> re.Pattern[str] | None:
        """Compile a filter given as a string; an empty string means no filter."""
        if v is None or isinstance(v, re.Pattern):
            return v
        if not isinstance(v, str):
            raise ValueError("filter must be a string")
        if v == "":
            return None
        try:
            return re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid filter: {v} ({e})") from e

    def matches(self, name: str) -> bool:
        """Whether a group name passes the filter (partial match; unset matches all)."""
        return self.filter is None or self.filter.search(name) is not None

    @classmethod
    def from_env(cls, **overrides: Any) -> "ReportOptions":
        """Create options from environment variables with CLI overrides.

        Environment variables:
        - LANGSPLIT_FILTER: default filter pattern
        - NO_COLOR: any non-empty value disables styling

        Args:
            **overrides: CLI arguments that override environment variables;
                None values are ignored

        Returns:
            Validated ReportOptions instance
        """
        env_config: dict[str, Any] = {}

        env_filter = os.getenv(FILTER_ENV)
        if env_filter:
            env_config["filter"] = env_filter

        if os.getenv(NO_COLOR_ENV):
            env_config["color"] = False

        final_config = {
            **env_config,
            **{key: value for key, value in overrides.items() if value is not None},
        }

        return cls(**final_config)
