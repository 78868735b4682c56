"""JSON Reporter Implementation."""

import json
from dataclasses import asdict

from confform.actions.reporters.base import BaseReporter
from confform.model.section import Section


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_sections(self, sections: list[Section]) -> None:
        data = [asdict(section) for section in sections]
        self.console.print_json(json.dumps(data))
