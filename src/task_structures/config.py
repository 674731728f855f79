"""Display and logging configuration."""

import os
from typing import Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "TASK_STRUCTURES"

DEFAULT_DATE_FORMAT = "%m/%d/%Y %H:%M"
DEFAULT_DEPTH_MARKER = "--|"
DEFAULT_LATE_PREFIX = "LATE: "


def _env(suffix: str) -> Optional[str]:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if value is None or value.strip() == "":
        return None
    return value


class DisplayConfig(BaseModel):
    """Settings for console rendering of trees and task lists."""

    date_format: str = Field(default=DEFAULT_DATE_FORMAT, min_length=1, description="strftime pattern for due dates")
    depth_marker: str = Field(default=DEFAULT_DEPTH_MARKER, description="Marker repeated once per tree level")
    late_prefix: str = Field(default=DEFAULT_LATE_PREFIX, description="Prefix for tasks past their due date")
    log_level: str = Field(default="WARNING", description="Root logging level for the CLI")

    @classmethod
    def from_env(cls, **overrides: Optional[str]) -> "DisplayConfig":
        """
        Build a config from ``TASK_STRUCTURES_*`` environment variables.

        Keyword overrides that are not None win over the environment.
        """
        values = {}
        for field_name in cls.model_fields:
            raw = _env(field_name.upper())
            if raw is not None:
                values[field_name] = raw

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
