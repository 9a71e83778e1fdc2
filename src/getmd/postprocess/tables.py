"""Compaction of Markdown table rows.

Converters pad table cells so columns line up visually. That padding is
noise for downstream consumers, so every table row outside fenced code
blocks is rewritten with single-space cell padding and minimal separator
dashes (alignment colons are kept).
"""

from typing import NamedTuple

FENCE_CHARS = "`~"
MIN_FENCE_LENGTH = 3


class FenceState(NamedTuple):
    """Open fenced code block, if any.

    An inactive state has ``length == 0``.
    """

    char: str = ""
    length: int = 0

    @property
    def active(self) -> bool:
        return self.length > 0


def split_lines(text: str) -> list[str]:
    """Split text into lines.

    A ``\\r`` directly before ``\\n`` belongs to the line ending, and the empty
    piece after a final newline is not a line of its own.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def fence_marker(line: str) -> tuple[str, int] | None:
    """Return the fence character and run length if ``line`` starts a fence.

    Args:
        line: Line with leading whitespace already removed.

    Returns:
        ``(char, length)`` for a run of at least three backticks or tildes,
        otherwise None.

    """
    if not line or line[0] not in FENCE_CHARS:
        return None

    marker = line[0]
    length = len(line) - len(line.lstrip(marker))
    if length < MIN_FENCE_LENGTH:
        return None
    return marker, length


def is_table_row(trimmed: str) -> bool:
    return len(trimmed) > 1 and trimmed.startswith("|") and trimmed.endswith("|")


def _compact_cell(cell: str) -> str:
    cell = cell.strip()
    if cell and all(c in "-:" for c in cell):
        # Separator cell: keep only alignment markers
        start = ":" if cell.startswith(":") else ""
        end = ":" if cell.endswith(":") else ""
        return f"{start}-{end}"
    return cell


def compact_table_row(row: str) -> str:
    """Rewrite a trimmed table row with single-space cell padding.

    Example:
        >>> compact_table_row("| :------ | ---: |")
        '| :- | -: |'

    """
    cells = [_compact_cell(cell) for cell in row[1:-1].split("|")]
    return f"| {' | '.join(cells)} |"


def compact_line(state: FenceState, line: str) -> tuple[FenceState, str]:
    """Compact a single line given the current fence state.

    Returns:
        The fence state after this line and the (possibly rewritten) line.

    """
    marker = fence_marker(line.lstrip())
    if marker is not None:
        char, length = marker
        if not state.active:
            return FenceState(char, length), line
        if char == state.char and length >= state.length:
            return FenceState(), line

    if state.active:
        return state, line

    trimmed = line.strip()
    if is_table_row(trimmed):
        return state, compact_table_row(trimmed)
    return state, line


def compact_markdown(markdown: str) -> str:
    """Compact redundant whitespace in Markdown table rows.

    - Trim padding in table cells
    - Minimize separator dashes (preserving alignment ``:``)
    - Leave fenced code blocks and non-table lines untouched

    Args:
        markdown: Markdown document.

    Returns:
        The document with compacted tables, lines joined with ``\\n``.

    """
    state = FenceState()
    compacted: list[str] = []
    for line in split_lines(markdown):
        state, line = compact_line(state, line)
        compacted.append(line)
    return "\n".join(compacted)
