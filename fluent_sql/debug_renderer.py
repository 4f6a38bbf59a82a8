"""
==========================
Debug rendering utilities.
==========================

Inlines bind parameter values into ``?`` placeholder positions so a built
statement can be read by a human. The result is never meant to be executed:
string values are quoted but not escaped.

Functions:
- replace_query_params: Substitute parameters into placeholders, left to right
- log_debug_query: Render a statement and write it to the diagnostic log

Usage:
    from fluent_sql.debug_renderer import replace_query_params

    replace_query_params("WHERE id = ? AND name = ?", [7, "bob"])
    # "WHERE id = 7 AND name = 'bob'"
"""

from typing import Any, Sequence

from core.logger import get_logger
from fluent_sql.params import QueryParam

PLACEHOLDER = '?'

logger = get_logger(__name__)


def replace_query_params(query: str, params: Sequence[Any]) -> str:
    """
    Replace ``?`` placeholders with formatted parameter values.

    Each parameter replaces the first ``?`` still present in the text, so a
    ``?`` inside an already substituted string value is consumed by the next
    parameter. Surplus parameters are dropped and surplus placeholders stay.

    Args:
        query: Statement text with positional placeholders
        params: Parameter values in bind order

    Returns:
        Statement text with values inlined
    """
    if not params:
        return query

    for param in params:
        query = query.replace(PLACEHOLDER, QueryParam.of(param).render(), 1)

    return query


def log_debug_query(query: str, params: Sequence[Any]) -> str:
    """
    Render a statement for inspection and write it to the debug log.

    The rendered text is passed as a logging argument, never as the format
    string, so ``%`` sequences in fragments or values are logged verbatim.

    Args:
        query: Statement text with positional placeholders
        params: Parameter values in bind order

    Returns:
        The rendered statement
    """
    rendered = replace_query_params(query, params)
    logger.debug("%s", rendered)
    return rendered
