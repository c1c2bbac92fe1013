"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_COLOR_* (environment or .env).
"""
from __future__ import annotations
import os, re, sys

from settings import truthy

_FORCE = truthy(os.environ.get("FORCE_COLOR"))
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))
_HEX_RE = re.compile(r"#?[0-9a-fA-F]{6}")

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def palette_value(name: str, default: str) -> str:
    """Hex color from the environment, or default if unset/invalid."""
    value = os.environ.get(name, '').strip()
    if _HEX_RE.fullmatch(value):
        return '#' + value.lstrip('#')
    return default

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY = palette_value('TODO_COLOR_PRIMARY', '#476EAE')
HEX_PENDING = palette_value('TODO_COLOR_PENDING', '#48B3AF')
HEX_DONE = palette_value('TODO_COLOR_DONE', '#A7E399')
HEX_DELETED = palette_value('TODO_COLOR_DELETED', '#9A9A9A')

PRIMARY = _from_hex(HEX_PRIMARY)

STATUS_COLOR = {
    'pending': _from_hex(HEX_PENDING),
    'done': _from_hex(HEX_DONE),
    'deleted': _from_hex(HEX_DELETED) + DIM,
}

HEADER_COLOR = PRIMARY
ID_COLOR = PRIMARY + BOLD

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)
