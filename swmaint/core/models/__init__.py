"""
Domain models — Pydantic types for swmaint.

    from swmaint.core.models import Command, Receipt, SoftwareEntry
"""

from swmaint.core.models.command import Command, Receipt
from swmaint.core.models.software import PHASES, Hook, SoftwareEntry

__all__ = [
    # command.py
    "Command",
    "Receipt",
    # software.py
    "Hook",
    "PHASES",
    "SoftwareEntry",
]
