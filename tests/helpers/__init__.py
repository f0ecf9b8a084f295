"""Test helpers for Argus tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_mandate, make_candidature, make_profile: Domain object builders

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.builders import make_candidature, make_mandate, make_profile
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority", "make_candidature", "make_mandate", "make_profile"]
