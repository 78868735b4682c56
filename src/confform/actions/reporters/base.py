"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from confform.model.section import Section


class BaseReporter(ABC):
    """Abstract base class for all section reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_sections(self, sections: list[Section]) -> None:
        """Report parsed sections to the console."""
        pass
