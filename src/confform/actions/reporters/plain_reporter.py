"""Plain Text Reporter Implementation."""

from confform.actions.reporters.base import BaseReporter
from confform.model.section import Section, SettingRow


class PlainReporter(BaseReporter):
    """Generates clean, text-only output."""

    def report_sections(self, sections: list[Section]) -> None:
        total = sum(len(s.rows) for s in sections)
        self.console.print("CONFIGURATION SECTIONS", style="bold", markup=False)
        self.console.print(f"Summary: {len(sections)} sections, {total} settings", markup=False)

        for section in sections:
            self.console.print()
            self.console.print(f"== {section.title or '(untitled)'} ==", markup=False)
            for row in section.rows:
                self.console.print(self._format_row(row), markup=False)

    @staticmethod
    def _format_row(row: SettingRow) -> str:
        line = f"  {row.name} = {row.value} [{row.control}]"
        if row.options:
            line += f" ({'/'.join(row.options)})"
        return line
