"""HTML Form Action - Render a configuration file as an editable form.

CONTRACT:
- read_only: True (the configuration file is never written back)
- requires_backup: False
- prerequisites: readable configuration file
"""

import logging
import posixpath
from pathlib import Path

from confform.actions.contract import ActionContract
from confform.exceptions import ConfigReadError
from confform.model.markup import MarkupNode
from confform.parser.config_file import ConfigParser

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"
STYLESHEET_NAME = "form.css"
SCRIPT_NAME = "form.js"


def read_config(path: str | Path) -> str:
    """Read configuration text from disk.

    Raises:
        ConfigReadError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Cannot read configuration file {path}: {e}") from e


class HTMLFormAction:
    """Action to generate the editable HTML form for a configuration file."""

    CONTRACT = ActionContract(
        read_only=True,
        requires_backup=False,
        rollback_support=False,
        prerequisites=["configuration file is readable"],
    )

    def __init__(
        self,
        assets_path: str = "",
        escape: bool = True,
        parser: ConfigParser | None = None,
    ) -> None:
        self.assets_path = assets_path
        self.escape = escape
        self.parser = parser or ConfigParser()

    def _asset_url(self, name: str) -> str:
        if not self.assets_path:
            return name
        return posixpath.join(self.assets_path, name)

    def build_document(self, nodes: list[MarkupNode]) -> MarkupNode:
        """Wrap parsed section nodes in the html/head/body shell."""
        head = MarkupNode("head").append(
            MarkupNode("link", {"rel": "stylesheet", "href": self._asset_url(STYLESHEET_NAME)}, self_closing=True),
            MarkupNode("script", {"src": self._asset_url(SCRIPT_NAME)}),
        )
        body = MarkupNode("body").append(
            MarkupNode("h3", {"_": "SAVE", "id": "save", "onclick": "save()"}),
            MarkupNode("form", children=nodes),
            MarkupNode("a", {"id": "a", "style": "display: none"}),
        )
        return MarkupNode("html").append(head, body)

    def render(self, config_text: str) -> str:
        """Render configuration text as a complete HTML document."""
        nodes = self.parser.parse(config_text)
        logger.debug("generating HTML")
        return DOCTYPE + self.build_document(nodes).serialize(escape=self.escape)

    def render_file(self, config_path: str | Path) -> str:
        """Read a configuration file and render it."""
        return self.render(read_config(config_path))

    def generate(self, config_path: str | Path, output_path: str | Path = "form.html") -> str:
        """Render a configuration file and save the form.

        Returns:
            The absolute path of the generated form.
        """
        html_content = self.render_file(config_path)
        output = Path(output_path)
        output.write_text(html_content, encoding="utf-8")
        logger.info("Wrote form for %s to %s", config_path, output)
        return str(output.resolve())
