"""Configuration module for Argus.

Available Configurations:
- WorkflowConfig: Assignment workload cap, lead time, sibling rejection policy
- AppConfig: Runtime environment (development or production)
- SupabaseConfig: Supabase connection settings
"""

from argus.config.app_config import (
    DEVELOPMENT,
    PRODUCTION,
    AppConfig,
    SupabaseConfig,
)
from argus.config.workflow_config import (
    DEFAULT_WORKFLOW_CONFIG,
    TEST_WORKFLOW_CONFIG,
    WorkflowConfig,
)

__all__ = [
    "AppConfig",
    "DEFAULT_WORKFLOW_CONFIG",
    "DEVELOPMENT",
    "PRODUCTION",
    "SupabaseConfig",
    "TEST_WORKFLOW_CONFIG",
    "WorkflowConfig",
]
