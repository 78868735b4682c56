"""Actions package - Action layer with explicit contracts.

Each action declares:
- read_only: Whether it modifies files
- requires_backup: Whether backup is mandatory
- rollback_support: Whether it can undo changes
- prerequisites: What must hold before the action runs
"""

from confform.actions.contract import ActionContract
from confform.actions.html_form import HTMLFormAction, read_config
from confform.actions.inspect import InspectAction

__all__ = ["ActionContract", "HTMLFormAction", "InspectAction", "read_config"]
