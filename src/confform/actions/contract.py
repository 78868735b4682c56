"""Explicit contracts declared by every action."""

from dataclasses import dataclass


@dataclass
class ActionContract:
    """Explicit contract for an action."""

    read_only: bool
    requires_backup: bool
    rollback_support: bool
    prerequisites: list[str]
