"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed (required for asyncio.TaskGroup)
2. The web, persistence and logging dependencies are importable
3. Project version is accessible

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        """Python 3.11+ is required for asyncio.TaskGroup support."""
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreFramework:
    """Verify core framework dependencies."""

    def test_fastapi_import(self) -> None:
        from fastapi import FastAPI

        assert FastAPI() is not None

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed (required for FastAPI integration)."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_uvicorn_import(self) -> None:
        import uvicorn

        assert uvicorn is not None


class TestPersistence:
    """Verify the Supabase client stack."""

    def test_supabase_async_client(self) -> None:
        from supabase import AsyncClient, acreate_client

        assert AsyncClient is not None
        assert acreate_client is not None

    def test_postgrest_api_error(self) -> None:
        from postgrest.exceptions import APIError

        assert issubclass(APIError, Exception)

    def test_httpx_async_import(self) -> None:
        from httpx import AsyncClient

        assert AsyncClient is not None


class TestStructuredLogging:
    def test_structlog_bind(self) -> None:
        import structlog

        bound_logger = structlog.get_logger().bind(component="workflow")
        assert bound_logger is not None


class TestProjectVersion:
    """Verify project metadata is accessible."""

    def test_version_accessible(self, project_version: str) -> None:
        assert isinstance(project_version, str)
        assert len(project_version) > 0

    def test_version_format(self, project_version: str) -> None:
        parts = project_version.split(".")
        assert len(parts) >= 2, f"Version must be semver format, got {project_version}"
