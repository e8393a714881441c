"""Color & style helpers for progress output.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import os, sys
from pathlib import Path
from typing import Dict, Mapping, Optional

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('TODO_RENAME_OK', 'TODO_RENAME_SKIP', 'TODO_RENAME_FAIL')

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def normalize_hex(value: str) -> Optional[str]:
    """Return '#rrggbb' for a valid 6-digit hex value (with or without '#')."""
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None

def parse_env_file(text: str) -> Dict[str, str]:
    """Extract palette overrides from .env style text; other keys are ignored."""
    overrides: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k in PALETTE_KEYS:
            hex_value = normalize_hex(v)
            if hex_value:
                overrides[k] = hex_value
    return overrides

def resolve_hex(key: str, default: str, environ: Mapping[str, str], overrides: Mapping[str, str]) -> str:
    """Priority: real env var > .env override > default."""
    from_env = normalize_hex(environ.get(key, ''))
    return from_env or overrides.get(key, default)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_OK_DEFAULT = '#A7E399'
HEX_SKIP_DEFAULT = '#48B3AF'
HEX_FAIL_DEFAULT = '#E36666'

_ENV_OVERRIDES: Dict[str, str] = {}
_env_path = Path(__file__).resolve().parent.parent / '.env'
if _env_path.exists():
    try:
        _ENV_OVERRIDES = parse_env_file(_env_path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError):
        _ENV_OVERRIDES = {}  # unreadable .env falls back to defaults

HEX_OK = resolve_hex('TODO_RENAME_OK', HEX_OK_DEFAULT, os.environ, _ENV_OVERRIDES)
HEX_SKIP = resolve_hex('TODO_RENAME_SKIP', HEX_SKIP_DEFAULT, os.environ, _ENV_OVERRIDES)
HEX_FAIL = resolve_hex('TODO_RENAME_FAIL', HEX_FAIL_DEFAULT, os.environ, _ENV_OVERRIDES)

STATUS_COLOR = {
    'renamed': _from_hex(HEX_OK),
    'skipped': DIM + _from_hex(HEX_SKIP),
    'failed': _from_hex(HEX_FAIL) + BOLD,
}

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def status_color(text: str, status: str) -> str:
    return color(text, STATUS_COLOR.get(status, ''))

__all__ = [
    'color','status_color','RESET','BOLD','DIM','STATUS_COLOR',
    'HEX_OK','HEX_SKIP','HEX_FAIL','parse_env_file','resolve_hex','normalize_hex',
]
