"""``KEY="VALUE"`` env-file rendering and reading.

Values are written double-quoted with backslash escapes, which dotenv
parsers (and :class:`EnvFile`) read back unchanged. ``source file.env`` in a
POSIX shell only round-trips values free of ``$``, backticks and escaped
characters: the shell expands ``$``/backticks inside double quotes and keeps
``\\n``-style escapes as literal text.
"""

from __future__ import annotations

import re
from pathlib import Path

_SHORT_ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_UNESCAPES: dict[str, str] = {v[1]: k for k, v in _SHORT_ESCAPES.items()}

_ESCAPE_RE = re.compile(
    r"\\(x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|.)", re.DOTALL,
)


def quote(value: str) -> str:
    """Wrap *value* in double quotes, escaping quotes, backslashes and
    non-printable characters. Printable Unicode is kept verbatim.
    """
    out = ['"']
    for ch in value:
        escaped = _SHORT_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch.isprintable():
            out.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x80:
                out.append(f"\\x{cp:02x}")
            elif cp < 0x10000:
                out.append(f"\\u{cp:04x}")
            else:
                out.append(f"\\U{cp:08x}")
    out.append('"')
    return "".join(out)


def _unescape(match: re.Match[str]) -> str:
    token = match.group(1)
    if len(token) > 1:
        return chr(int(token[1:], 16))
    return _UNESCAPES.get(token, "\\" + token)


def unquote(text: str) -> str:
    """Inverse of :func:`quote` for a double-quoted value."""
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return _ESCAPE_RE.sub(_unescape, text[1:-1])
    if len(text) >= 2 and text[0] == text[-1] == "'":
        return text[1:-1]
    return text


def render_line(name: str, value: str) -> str:
    """Render one ``name="value"`` output line, newline-terminated."""
    return f"{name}={quote(value)}\n"


class EnvFile:
    """Reads a simple ``KEY=VALUE`` file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self, key: str) -> str:
        """Return the value for *key*, or ``""`` if absent."""
        return self.read_all().get(key, "")

    def read_all(self) -> dict[str, str]:
        """Parse the env file into a ``{key: value}`` mapping."""
        if not self.path.is_file():
            return {}
        result: dict[str, str] = {}
        for line in self.path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            result[key] = unquote(value.strip())
        return result
