"""Table rendering for the todo list.

Column widths are measured in terminal cells, not code points: East
Asian wide characters (e.g. Japanese task names) take two cells, so
padding by len() would break the alignment.
"""
import unicodedata
from typing import Callable, List, Sequence

from models import DEADLINE_FORMAT, Todo
from theme import color, strip_ansi, HEADER_COLOR, ID_COLOR, STATUS_COLOR

HEADERS = ("ID", "STATUS", "TASK", "LIMIT")
MIN_WIDTHS = (2, 7, 24, 19)
SEP = " "
EMPTY_MESSAGE = "No todos."


def status_label(todo: Todo) -> str:
    # deleted wins over done; the guards keep both from being set anyway
    if todo.is_deleted:
        return 'deleted'
    if todo.is_done:
        return 'done'
    return 'pending'


def display_width(text: str) -> int:
    """Number of terminal cells `text` occupies (ANSI codes excluded)."""
    width = 0
    for ch in strip_ansi(text):
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1
    return width


def pad(text: str, width: int) -> str:
    """Left-align text to `width` display cells; never truncates."""
    return text + ' ' * max(0, width - display_width(text))


def format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    """Join cells padded to precomputed widths; the last cell is not padded."""
    padded = [pad(cell, w) for cell, w in zip(cells[:-1], widths)]
    return SEP.join(padded + [cells[-1]]) if cells else ''


def column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    widths = list(MIN_WIDTHS)
    for row in [HEADERS, *rows]:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))
    return widths


def _cells(todo: Todo) -> List[str]:
    status = status_label(todo)
    return [
        color(str(todo.id), ID_COLOR),
        color(status, STATUS_COLOR[status]),
        todo.task,
        todo.limit.strftime(DEADLINE_FORMAT),
    ]


def render_table(todos: Sequence[Todo]) -> List[str]:
    rows = [_cells(t) for t in todos]
    widths = column_widths(rows)
    lines = [
        format_row([color(h, HEADER_COLOR) for h in HEADERS], widths),
        format_row(['-' * w for w in widths], widths),
    ]
    lines.extend(format_row(row, widths) for row in rows)
    return lines


def show(todos: Sequence[Todo], out: Callable[[str], None] = print) -> None:
    if not todos:
        out(EMPTY_MESSAGE)
        return
    for line in render_table(todos):
        out(line)
