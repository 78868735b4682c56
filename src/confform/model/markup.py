"""MarkupNode - Generic tree element for building HTML documents.

Used both for the document shell and as the parser's output unit.
Attribute values are either plain strings or the BOOLEAN marker, which
renders as a bare key (``checked``, ``selected``).
"""

from collections.abc import Iterator, Mapping
from enum import Enum

from markupsafe import escape as html_escape


class Flag(Enum):
    """Tagged value for valueless (boolean) attributes."""

    SET = "set"


BOOLEAN = Flag.SET

# Constructor key whose value becomes the node's inline text.
TEXT_KEY = "_"

AttributeValue = str | Flag


class MarkupNode:
    """An ordered, labeled tree node with attributes.

    Attributes:
        tag: Element name. Fixed after construction.
        attributes: Insertion-ordered mapping of name to value or BOOLEAN.
        text_content: Inline text, rendered before any children.
        children: Child nodes in rendering order.
        self_closing: If True the closing tag is omitted.
    """

    def __init__(
        self,
        tag: str,
        attributes: Mapping[str, AttributeValue | None] | None = None,
        self_closing: bool = False,
        text_content: str | None = None,
        children: list["MarkupNode"] | None = None,
    ) -> None:
        self._tag = tag
        self._self_closing = self_closing
        self.text_content = text_content
        self.children: list[MarkupNode] = list(children or [])
        self.attributes: dict[str, AttributeValue] = {}

        for key, value in (attributes or {}).items():
            if key == TEXT_KEY:
                self.text_content = None if value is None or value is BOOLEAN else str(value)
            else:
                self.attributes[key] = BOOLEAN if value is None else value

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def self_closing(self) -> bool:
        return self._self_closing

    def append(self, *children: "MarkupNode") -> "MarkupNode":
        """Append children in order and return self."""
        self.children.extend(children)
        return self

    def get(self, key: str, default: AttributeValue | None = None) -> AttributeValue | None:
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def iter(self, tag: str | None = None) -> Iterator["MarkupNode"]:
        """Walk the tree depth-first (pre-order), including this node."""
        if tag is None or self._tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def serialize(self, escape: bool = True) -> str:
        """Render this node and its subtree as markup.

        Args:
            escape: HTML-escape attribute values and text content.
                With False, values are inserted verbatim.

        Returns:
            The serialized markup string.
        """
        quote = _escaped if escape else str
        props = "".join(
            self._render_attribute(key, value, quote)
            for key, value in self.attributes.items()
            if key != TEXT_KEY
        )
        content = self.text_content
        if content is None:
            # "_" assigned after construction still renders as text
            late_text = self.attributes.get(TEXT_KEY)
            content = None if late_text is BOOLEAN else late_text
        text = quote(content) if content else ""
        inner = "".join(child.serialize(escape) for child in self.children)
        closing = "" if self._self_closing else f"</{self._tag}>"

        return f"<{self._tag}{props}>{text}{inner}{closing}"

    @staticmethod
    def _render_attribute(key: str, value: AttributeValue, quote) -> str:
        if value is BOOLEAN:
            return f" {key}"
        return f' {key}="{quote(value)}"'

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"MarkupNode({self._tag!r}, {self.attributes!r}, children={len(self.children)})"


def _escaped(value: str) -> str:
    return str(html_escape(value))
