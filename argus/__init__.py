"""
Argus - Mandate workflow engine for the investigator marketplace.

Agencies post mandates, investigators apply or are directly assigned,
and every status change goes through a declarative transition table,
a validation service and an orchestrator that emits notifications
only after the mutation has committed.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
