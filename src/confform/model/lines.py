"""Line variants - Classification result for a single configuration line."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Separator:
    """Blank line. Only a zero-length line flushes; a one-character line is noise."""

    flush: bool = True


@dataclass(frozen=True)
class Comment:
    """A ``# text`` line."""

    body: str


@dataclass(frozen=True)
class Instruction:
    """A ``name = value # typehint`` line.

    Attributes:
        name: Setting identifier.
        value: Raw value token (never contains whitespace).
        type_hint: Free-form hint after the trailing ``#``.
        line_number: 1-based position in the source text.
    """

    name: str
    value: str
    type_hint: str
    line_number: int = 0


@dataclass(frozen=True)
class Ignored:
    """Any other non-empty line."""

    text: str


Line = Separator | Comment | Instruction | Ignored
