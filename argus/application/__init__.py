"""
Application layer - Use cases and orchestration for Argus.

This layer contains:
- Application services (validation, candidature workflow, lifecycle, notifications)
- Port definitions (abstract interfaces for infrastructure)
- DTOs returned to callers

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure, api
"""
