"""Comment footer markers.

Every comment body this tool writes ends with a footer line::

    <content>

    ###### [pyright-review:0123456789abcdef]

The footer is the only place a later run looks for the subject key. Decoding
reads the last line of the body and matches it against an anchored pattern,
so marker-like text in the content (diagnostic messages, quotes of other
comments) is never picked up.
"""
import re
from functools import lru_cache

FOOTER_HEADING = "######"

_PREFIX_RE = re.compile(r"[a-z][a-z0-9-]*")
_KEY_RE = re.compile(r"[0-9a-f]{16,64}")

# Footers written by earlier releases of this action
_LEGACY_FOOTER_RES = (
    re.compile(r"#{1,6} ?[0-9a-f]{16,64}"),
    re.compile(r"#{1,6} ?\[[0-9a-f]{16,64}\]"),
    re.compile(r"#{1,6} ?\[?pyright[a-z0-9_-]*:[^\]\s]+\]?"),
)
# Headings those releases opened every comment with
_LEGACY_HEADINGS = ("## Pyright Summary", "**Pyright Warning/Error**")


def encode(prefix: str, key: str) -> str:
    """Marker token for a key, e.g. ``[pyright-review:0123456789abcdef]``."""
    if not _PREFIX_RE.fullmatch(prefix):
        raise ValueError(f"Invalid marker prefix: {prefix!r}")
    if not _KEY_RE.fullmatch(key):
        raise ValueError(f"Invalid marker key: {key!r}")
    return f"[{prefix}:{key}]"


@lru_cache
def _footer_re(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"{FOOTER_HEADING} \[{re.escape(prefix)}:(?P<key>[0-9a-f]{{16,64}})\]")


def _split_footer(body: str) -> tuple[list[str], str] | None:
    lines = body.rstrip().splitlines()
    if not lines:
        return None
    return lines[:-1], lines[-1].strip()


def attach(body: str, prefix: str, key: str) -> str:
    """Append the marker footer to a rendered body."""
    return f"{body.rstrip()}\n\n{FOOTER_HEADING} {encode(prefix, key)}"


def decode(prefix: str, body: str | None) -> str | None:
    """Key from the footer of a body, or None if it carries no marker for this prefix."""
    if not body:
        return None
    parts = _split_footer(body)
    if parts is None:
        return None
    content, footer = parts
    if content and content[-1].strip():
        # Footer must be separated from the content by a blank line
        return None
    match = _footer_re(prefix).fullmatch(footer)
    return match.group("key") if match else None


def is_legacy(body: str | None) -> bool:
    """Whether a body is one of our old comments: an old heading and an old-format footer."""
    if not body or not body.lstrip().startswith(_LEGACY_HEADINGS):
        return False
    parts = _split_footer(body)
    if parts is None:
        return False
    _, footer = parts
    return any(p.fullmatch(footer) for p in _LEGACY_FOOTER_RES)
