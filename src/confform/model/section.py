"""Section views - Read-only summaries of the parser's node sequence.

The parser emits alternating ``h2`` / ``table`` nodes. Reporters work on
these flattened views instead of walking markup.
"""

from dataclasses import dataclass, field

from confform.model.markup import MarkupNode


@dataclass
class SettingRow:
    """One rendered setting.

    Attributes:
        name: Setting identifier (label cell text).
        control: One of ``text``, ``number``, ``checkbox``, ``select``.
        value: Current value; ``"true"``/``"false"`` for checkboxes.
        options: Enumerated choices for ``select`` controls.
        description: Comment text shown beside the control.
    """

    name: str
    control: str
    value: str
    options: list[str] = field(default_factory=list)
    description: str = ""


@dataclass
class Section:
    """A header and the rows of the table it introduces."""

    title: str | None
    rows: list[SettingRow] = field(default_factory=list)


def row_from_node(tr: MarkupNode) -> SettingRow:
    """Recover a SettingRow from a ``tr`` produced by the parser."""
    label_cell, control_cell, description_cell = tr.children[:3]
    name = next(label_cell.iter("p")).text_content or ""
    control = control_cell.children[0]

    if control.tag == "select":
        options = [opt.text_content or "" for opt in control.iter("option")]
        selected = next((opt.text_content or "" for opt in control.iter("option") if opt.has_attribute("selected")), "")
        return SettingRow(
            name=name,
            control="select",
            value=selected,
            options=options,
            description=(description_cell.text_content or "").strip(),
        )

    input_type = str(control.get("type", "text"))
    if input_type == "checkbox":
        value = "true" if control.has_attribute("checked") else "false"
    else:
        value = str(control.get("value", ""))

    return SettingRow(
        name=name,
        control=input_type,
        value=value,
        description=(description_cell.text_content or "").strip(),
    )


def sections_from_nodes(nodes: list[MarkupNode]) -> list[Section]:
    """Pair each header with the table that follows it.

    A table with no preceding header becomes a Section with title None.
    """
    sections: list[Section] = []
    title: str | None = None

    for node in nodes:
        if node.tag == "h2":
            title = (node.text_content or "").strip()
        elif node.tag == "table":
            sections.append(Section(title=title, rows=[row_from_node(tr) for tr in node.children]))
            title = None

    return sections
