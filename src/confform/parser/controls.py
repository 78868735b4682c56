"""Control construction for instruction lines.

Maps an instruction's type hint to the HTML control that edits it.
"""

from confform.model.lines import Instruction
from confform.model.markup import BOOLEAN, MarkupNode

TYPES_MAP = {
    "string": "text",
    "number": "number",
    "false/true": "checkbox",
}

# Separator for enumerated hints such as ``add/remove/ignore``
OPTION_SEPARATOR = "/"


def build_control(instruction: Instruction) -> MarkupNode:
    """Build the input or select node for one instruction.

    Args:
        instruction: Classified instruction line.

    Returns:
        An ``input`` node for known hints and free text, or a ``select``
        node when the hint enumerates more than one option.
    """
    input_type = TYPES_MAP.get(instruction.type_hint)

    if input_type is None:
        choices = instruction.type_hint.split(OPTION_SEPARATOR)
        if len(choices) > 1:
            return _build_select(instruction, choices)
        input_type = "text"

    node = MarkupNode(
        "input",
        {
            "type": input_type,
            "name": instruction.name,
            "placeholder": instruction.type_hint,
        },
        self_closing=True,
    )

    if input_type == "checkbox":
        if instruction.value == "true":
            node.attributes["checked"] = BOOLEAN
    else:
        node.attributes["value"] = instruction.value

    return node


def _build_select(instruction: Instruction, choices: list[str]) -> MarkupNode:
    select = MarkupNode("select", {"name": instruction.name})
    for choice in choices:
        attrs = {"_": choice, "value": choice}
        if choice == instruction.value:
            attrs["selected"] = None
        select.append(MarkupNode("option", attrs))
    return select
