"""Inspect Action - Summarize parsed configuration sections in the terminal.

CONTRACT:
- read_only: True
- requires_backup: False
- prerequisites: None
"""

from rich.console import Console

from confform.actions.contract import ActionContract
from confform.actions.reporters.base import BaseReporter
from confform.actions.reporters.json_reporter import JsonReporter
from confform.actions.reporters.plain_reporter import PlainReporter
from confform.actions.reporters.rich_reporter import RichReporter
from confform.model.section import Section, sections_from_nodes
from confform.parser.config_file import ConfigParser

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "plain": PlainReporter,
    "json": JsonReporter,
}


class InspectAction:
    """Parse configuration text and report its sections."""

    CONTRACT = ActionContract(
        read_only=True,
        requires_backup=False,
        rollback_support=False,
        prerequisites=[],
    )

    def __init__(self, console: Console | None = None, fmt: str = "rich", parser: ConfigParser | None = None) -> None:
        if fmt not in REPORTERS:
            raise ValueError(f"Unknown report format: {fmt}")
        self.console = console or Console()
        self.reporter = REPORTERS[fmt](self.console)
        self.parser = parser or ConfigParser()

    def sections(self, config_text: str) -> list[Section]:
        return sections_from_nodes(self.parser.parse(config_text))

    def run(self, config_text: str) -> list[Section]:
        """Parse, report, and return the sections."""
        sections = self.sections(config_text)
        self.reporter.report_sections(sections)
        return sections
