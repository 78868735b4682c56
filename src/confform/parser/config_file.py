"""Annotated Configuration Parser.

Parses ``name = value # typehint`` configuration files into a sequence of
alternating ``h2`` (section header) and ``table`` (setting rows) nodes.

IMPORTANT DESIGN NOTES:
1. Only a zero-length line flushes accumulated state; one-character lines
   are noise left over from mixed line endings
2. A comment block followed by a blank line with no setting pending becomes
   a section header; otherwise it becomes the description of the pending setting
3. Headers that end up with no rows are dropped, both mid-file and at the end
4. Malformed lines are ignored, never reported
"""

import logging
import os
import re
from dataclasses import dataclass, field

from confform.model.lines import Comment, Ignored, Instruction, Line, Separator
from confform.model.markup import MarkupNode
from confform.parser.controls import build_control

logger = logging.getLogger(__name__)

HEADER_ONCLICK = "toggle(event)"


class LineClassifier:
    """Ordered matchers for a single configuration line. First match wins."""

    # Example: # Spaces to indent '{' and '}'
    COMMENT_RE = re.compile(r"^#\s*(.*)")

    # Example: indent_columns = 8 # number
    INSTRUCTION_RE = re.compile(r"^(\w+)\s*=\s*(\S+)\s*#\s*(.*)")

    def classify(self, line: str, line_number: int = 0) -> Line:
        if len(line) <= 1:
            return Separator(flush=len(line) == 0)

        comment_match = self.COMMENT_RE.match(line)
        if comment_match:
            return Comment(body=comment_match.group(1))

        instruction_match = self.INSTRUCTION_RE.match(line)
        if instruction_match:
            return Instruction(
                name=instruction_match.group(1),
                value=instruction_match.group(2),
                type_hint=instruction_match.group(3),
                line_number=line_number,
            )

        return Ignored(text=line)


@dataclass
class ParseContext:
    """Accumulator state for one parse. Never shared between calls."""

    comment_accumulator: str = ""
    pending_instruction: MarkupNode | None = None
    current_table: MarkupNode = field(default_factory=lambda: MarkupNode("table"))
    output: list[MarkupNode] = field(default_factory=list)
    line_number: int = 0


class ConfigParser:
    """Parser for comment-annotated key/value configuration text.

    Converts the flat file into header/table node pairs ready to be
    embedded in a form.
    """

    LINE_SPLIT_RE = re.compile(r"\r?\n")

    def __init__(self, line_separator: str = os.linesep, classifier: LineClassifier | None = None) -> None:
        self.line_separator = line_separator
        self.classifier = classifier or LineClassifier()

    def parse(self, config_text: str) -> list[MarkupNode]:
        """Parse configuration text into renderable nodes.

        Args:
            config_text: Full contents of the configuration file.

        Returns:
            Alternating ``h2`` and ``table`` nodes. Empty if nothing renderable.
        """
        logger.debug("parsing config")
        ctx = ParseContext()

        for line_num, line in enumerate(self.LINE_SPLIT_RE.split(config_text), start=1):
            ctx.line_number = line_num
            self._feed(ctx, self.classifier.classify(line, line_num))

        self._finish(ctx)
        logger.debug("parsed %d section node(s)", len(ctx.output))
        return ctx.output

    def _feed(self, ctx: ParseContext, line: Line) -> None:
        """Apply one classified line to the parse state."""
        if isinstance(line, Separator):
            if line.flush:
                self._flush(ctx)
        elif isinstance(line, Comment):
            ctx.comment_accumulator += self.line_separator + line.body
        elif isinstance(line, Instruction):
            if ctx.pending_instruction is not None:
                logger.debug(
                    "line %d: setting %s replaces unflushed %s",
                    line.line_number,
                    line.name,
                    ctx.pending_instruction.get("name"),
                )
            else:
                logger.debug("line %d: setting %s (%s)", line.line_number, line.name, line.type_hint)
            ctx.pending_instruction = build_control(line)
        else:
            # Ignored lines leave the state untouched
            logger.debug("line %d: ignored %r", ctx.line_number, line.text)

    def _flush(self, ctx: ParseContext) -> None:
        """Turn accumulated comments and the pending setting into nodes."""
        if ctx.comment_accumulator and ctx.pending_instruction is None:
            if ctx.current_table.children:
                ctx.output.append(ctx.current_table)
            elif ctx.output:
                # Previous header never got a row
                dropped = ctx.output.pop()
                logger.debug(
                    "line %d: dropping empty section %r",
                    ctx.line_number,
                    (dropped.text_content or "").strip(),
                )

            ctx.output.append(
                MarkupNode("h2", {"onclick": HEADER_ONCLICK}, text_content=ctx.comment_accumulator)
            )
            ctx.current_table = MarkupNode("table")

        if ctx.pending_instruction is not None:
            ctx.current_table.append(self._build_row(ctx.pending_instruction, ctx.comment_accumulator))

        ctx.comment_accumulator = ""
        ctx.pending_instruction = None

    def _finish(self, ctx: ParseContext) -> None:
        """End-of-input handling: implicit flush, keep last table, drop orphan header."""
        self._flush(ctx)

        if ctx.current_table.children:
            ctx.output.append(ctx.current_table)

        if ctx.output and ctx.output[-1].tag != "table":
            ctx.output.pop()

    @staticmethod
    def _build_row(control: MarkupNode, description: str) -> MarkupNode:
        """Build ``tr > [td > p(name), td > control, td(description)]``."""
        label = MarkupNode("td").append(MarkupNode("p", text_content=str(control.get("name", ""))))
        cell = MarkupNode("td").append(control)
        return MarkupNode("tr").append(label, cell, MarkupNode("td", text_content=description))
