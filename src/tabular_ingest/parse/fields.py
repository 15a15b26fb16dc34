from __future__ import annotations

from typing import Optional

from ..models import QuoteMode

_QUOTE_CHARS: dict[QuoteMode, tuple[str, ...]] = {
    QuoteMode.LENIENT: ('"', "'"),
    QuoteMode.STRICT: ('"',),
}


def split_fields(line: str, delimiter: str, quoting: QuoteMode = QuoteMode.LENIENT) -> list[str]:
    """Split one line into trimmed fields.

    A quote character outside a quoted span opens one that only the same
    character closes. Inside the span a doubled quote is a literal quote and
    the delimiter is ordinary text. An unterminated quote runs to the end of
    the line; this never raises.
    """
    quotes = _QUOTE_CHARS[quoting]
    fields: list[str] = []
    buf: list[str] = []
    open_quote: Optional[str] = None

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]

        if open_quote is None:
            if ch in quotes:
                open_quote = ch
            elif ch == delimiter:
                fields.append("".join(buf).strip())
                buf = []
            else:
                buf.append(ch)
            i += 1
            continue

        if ch == open_quote:
            if i + 1 < n and line[i + 1] == open_quote:
                buf.append(ch)
                i += 2
                continue
            open_quote = None
        else:
            buf.append(ch)
        i += 1

    fields.append("".join(buf).strip())
    return fields


def field_count(line: str, delimiter: str, quoting: QuoteMode = QuoteMode.LENIENT) -> int:
    return len(split_fields(line, delimiter, quoting))
