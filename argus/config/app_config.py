"""Application runtime configuration.

Environment Variables:
- ARGUS_ENVIRONMENT: "development" (console logs, in-memory stubs) or
  "production" (JSON logs, Supabase). Default: development.
- SUPABASE_URL: Supabase project URL (required outside development)
- SUPABASE_KEY: Supabase service key (required outside development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEVELOPMENT = "development"
PRODUCTION = "production"


@dataclass(frozen=True)
class SupabaseConfig:
    """Supabase connection settings.

    Attributes:
        url: Project URL.
        key: Service role key.
    """

    url: str
    key: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("SUPABASE_URL must not be empty")
        if not self.key:
            raise ValueError("SUPABASE_KEY must not be empty")

    def __repr__(self) -> str:
        return f"SupabaseConfig(url={self.url!r}, key='***')"

    @classmethod
    def from_environment(cls) -> SupabaseConfig:
        """Read SUPABASE_URL and SUPABASE_KEY.

        Raises:
            ValueError: If either variable is not set.
        """
        url = os.environ.get("SUPABASE_URL", "")
        key = os.environ.get("SUPABASE_KEY", "")
        if not url or not key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_KEY environment variables must be set "
                "outside the development environment."
            )
        return cls(url=url, key=key)


@dataclass(frozen=True)
class AppConfig:
    """Process-level settings.

    Attributes:
        environment: DEVELOPMENT or PRODUCTION.
    """

    environment: str = DEVELOPMENT

    def __post_init__(self) -> None:
        if self.environment not in (DEVELOPMENT, PRODUCTION):
            raise ValueError(
                f"environment must be {DEVELOPMENT!r} or {PRODUCTION!r}, "
                f"got {self.environment!r}"
            )

    @property
    def uses_stubs(self) -> bool:
        """True when repositories are the in-memory stubs."""
        return self.environment == DEVELOPMENT

    @classmethod
    def from_environment(cls) -> AppConfig:
        return cls(
            environment=os.environ.get("ARGUS_ENVIRONMENT", DEVELOPMENT).strip().lower()
        )
