"""
Filter token lexer.

One ``filter.<column>`` value is written as ``[$outer:]$inner:value``,
``value`` (implies ``$eq``) or ``$null``. :func:`get_filter_tokens` turns it
into the triple ``[outer, inner, value]`` or into ``[]`` when the input
cannot be read.

A value that itself contains a ``$word:`` sequence is read as an operator
marker; such values cannot be filtered on.
"""

from __future__ import annotations

import re

from .operators import FilterOperator

_OPERATOR_MARKER = re.compile(r"(\$\w+):")


def get_filter_tokens(raw: str) -> list[str | None]:
    """
    Split *raw* into ``[outer_op, inner_op, value]``.

    Returns an empty list for inputs with more than three tokens. Missing
    slots are ``None``.

    Example::

        >>> get_filter_tokens("$not:$eq:5")
        ['$not', '$eq', '5']
        >>> get_filter_tokens("5")
        [None, '$eq', '5']
    """
    tokens: list[str | None] = []
    markers = [m.group(0) for m in _OPERATOR_MARKER.finditer(raw)]

    if markers:
        value = raw.replace("".join(markers), "", 1)
        tokens.extend(marker[:-1] for marker in markers)
        tokens.append(value)
    else:
        tokens.append(raw)

    if len(tokens) > 3:
        return []
    if len(tokens) == 2:
        if tokens[1] == FilterOperator.NULL.value:
            tokens.append(None)
        else:
            tokens.insert(0, None)
    elif len(tokens) == 1:
        if tokens[0] == FilterOperator.NULL.value:
            tokens = [None, FilterOperator.NULL.value, None]
        else:
            tokens = [None, FilterOperator.EQ.value, raw]

    return tokens
