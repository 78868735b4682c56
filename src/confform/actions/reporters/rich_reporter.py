"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from confform.actions.reporters.base import BaseReporter
from confform.model.section import Section, SettingRow

CONTROL_COLORS = {
    "text": "white",
    "number": "cyan",
    "checkbox": "green",
    "select": "magenta",
}


class RichReporter(BaseReporter):
    """Generates high-fidelity terminal output using Rich."""

    def report_sections(self, sections: list[Section]) -> None:
        if not sections:
            self.console.print("   [yellow]No renderable settings found.[/]")
            return

        total = sum(len(s.rows) for s in sections)
        self.console.print()
        self.console.print("Configuration Sections", style="bold underline")
        self.console.print(f"   Summary: {len(sections)} sections, {total} settings")
        self.console.print()

        for section in sections:
            self._print_section(section)

    def _print_section(self, section: Section) -> None:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Setting", style="bold")
        table.add_column("Control")
        table.add_column("Value")
        table.add_column("Description", style="dim")

        for row in section.rows:
            table.add_row(
                escape(row.name),
                self._control_label(row),
                escape(row.value),
                escape(row.description),
            )

        title = escape(section.title) if section.title else "[dim](untitled)[/]"
        self.console.print(Panel(table, title=title, border_style="blue"))

    @staticmethod
    def _control_label(row: SettingRow) -> str:
        color = CONTROL_COLORS.get(row.control, "white")
        label = f"[{color}]{row.control}[/]"
        if row.options:
            label += f" [dim]{escape('/'.join(row.options))}[/]"
        return label
