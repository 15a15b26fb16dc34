from __future__ import annotations

import re

from ..values import NULL, Number, Text, Value

GROUP_SEPARATOR = ","

# 1,234 / -12,345,678.9 : groups of exactly three digits after the first
_GROUPED_NUMBER_RE = re.compile(r"^-?\d{1,3}(?:,\d{3})+(?:\.\d+)?$")
# 42 / -3.5 / +7
_PLAIN_NUMBER_RE = re.compile(r"^[+-]?\d+(?:\.\d+)?$")


def is_number_token(token: str) -> bool:
    token = token.strip()
    return bool(_GROUPED_NUMBER_RE.match(token) or _PLAIN_NUMBER_RE.match(token))


def coerce_value(token: str) -> Value:
    """
    Classify one field.

    Empty -> Null; grouped or plain decimal -> Number; anything else -> Text
    holding the trimmed token as-is. There is no locale handling beyond the
    fixed ',' group separator and '.' decimal point.
    """
    token = token.strip()
    if token == "":
        return NULL
    if _GROUPED_NUMBER_RE.match(token):
        return Number(float(token.replace(GROUP_SEPARATOR, "")))
    if _PLAIN_NUMBER_RE.match(token):
        return Number(float(token))
    return Text(token)
