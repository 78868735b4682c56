"""Terminal reporters for parsed configuration sections."""

from confform.actions.reporters.base import BaseReporter
from confform.actions.reporters.json_reporter import JsonReporter
from confform.actions.reporters.plain_reporter import PlainReporter
from confform.actions.reporters.rich_reporter import RichReporter

__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "RichReporter"]
