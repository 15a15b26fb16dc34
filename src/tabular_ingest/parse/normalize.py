from __future__ import annotations

import re
from typing import Union

_BOM = "\ufeff"
_COMMENT_PREFIX = "#"
_LEADING_RE = re.compile("^[\\s" + _BOM + "]+")


def decode_document(raw: Union[str, bytes]) -> str:
    """
    Turn an uploaded document into text.

    Bytes are decoded as UTF-8; a UTF-8 byte-order mark is consumed and
    undecodable bytes are replaced rather than rejected.
    """
    if isinstance(raw, bytes):
        return raw.decode("utf-8-sig", errors="replace")
    return raw


def _is_content(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(_COMMENT_PREFIX)


def normalize_lines(text: str) -> list[str]:
    """Split text into usable lines.

    Unifies CRLF and bare CR to LF and drops lines that are blank or whose
    first non-blank character is '#'. The surviving block is trimmed as a
    whole: leading BOMs and whitespace come off the first line, trailing
    whitespace off the last. Inner lines are kept as-is, so a trailing tab
    still delimits an empty last field.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line for line in text.split("\n") if _is_content(line)]

    while lines:
        head = _LEADING_RE.sub("", lines[0])
        if _is_content(head):
            lines[0] = head
            break
        # a BOM in front of a comment or blank
        lines.pop(0)
    if lines:
        lines[-1] = lines[-1].rstrip()
    return lines


def normalize_text(text: str) -> str:
    """Normalized text as a single string. Idempotent."""
    return "\n".join(normalize_lines(text))
