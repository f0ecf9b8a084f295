"""
Domain layer - Pure business logic for Argus.

This layer contains:
- Domain models (Mandate, Candidature, Notification, ...)
- The mandate workflow transition table
- Domain exceptions

IMPORT RULES:
- CANNOT import from: application, infrastructure, api, bootstrap
"""
