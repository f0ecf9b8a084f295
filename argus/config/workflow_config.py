"""Mandate workflow configuration.

This module defines configuration for the assignment and scheduling rules
of the workflow engine, with environment variable overrides for
production tuning.

Environment Variables:
- ARGUS_MAX_CONCURRENT_ASSIGNMENTS: In-progress mandates per investigator
  before new assignments are refused (default: 5)
- ARGUS_MIN_LEAD_TIME_HOURS: Minimum delay between creation and the
  required date (default: 24)
- ARGUS_REJECT_SIBLING_CANDIDATURES: Reject the other pending candidatures
  when one is accepted (default: true)
- ARGUS_MARKETPLACE_TIMEZONE: IANA zone whose calendar day is compared
  against investigators' blocked dates (default: America/Toronto)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class WorkflowConfig:
    """Configuration for mandate workflow rules.

    Attributes:
        max_concurrent_assignments: Number of in-progress mandates an
            investigator may hold. Reaching it blocks further assignment.
            Default: 5.
        min_lead_time_hours: Minimum hours between now and a new mandate's
            required date. Default: 24.
        reject_sibling_candidatures: Whether accepting a candidature rejects
            the other pending ones for the same mandate. Default: True.
        marketplace_timezone: IANA zone of the marketplace. Blocked dates
            are calendar days in this zone. Default: America/Toronto.
    """

    max_concurrent_assignments: int = 5
    min_lead_time_hours: int = 24
    reject_sibling_candidatures: bool = True
    marketplace_timezone: str = "America/Toronto"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_concurrent_assignments < 1:
            raise ValueError(
                "max_concurrent_assignments must be positive, "
                f"got {self.max_concurrent_assignments}"
            )
        if self.min_lead_time_hours < 0:
            raise ValueError(
                f"min_lead_time_hours must be non-negative, got {self.min_lead_time_hours}"
            )
        try:
            ZoneInfo(self.marketplace_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"unknown marketplace_timezone {self.marketplace_timezone!r}"
            ) from e

    @property
    def min_lead_time(self) -> timedelta:
        """Minimum lead time as a timedelta."""
        return timedelta(hours=self.min_lead_time_hours)

    @property
    def timezone(self) -> tzinfo:
        """Marketplace zone used for calendar-day comparisons."""
        return ZoneInfo(self.marketplace_timezone)

    @classmethod
    def from_environment(cls) -> "WorkflowConfig":
        """Create config from environment variables with defaults.

        Returns:
            WorkflowConfig with values from environment or defaults.
        """
        return cls(
            max_concurrent_assignments=_get_int_env(
                "ARGUS_MAX_CONCURRENT_ASSIGNMENTS", 5
            ),
            min_lead_time_hours=_get_int_env("ARGUS_MIN_LEAD_TIME_HOURS", 24),
            reject_sibling_candidatures=_get_bool_env(
                "ARGUS_REJECT_SIBLING_CANDIDATURES", True
            ),
            marketplace_timezone=os.environ.get(
                "ARGUS_MARKETPLACE_TIMEZONE", "America/Toronto"
            ),
        )


# Default production config
DEFAULT_WORKFLOW_CONFIG = WorkflowConfig()

# Testing config with a low workload cap
TEST_WORKFLOW_CONFIG = WorkflowConfig(
    max_concurrent_assignments=2,
    min_lead_time_hours=1,
)
