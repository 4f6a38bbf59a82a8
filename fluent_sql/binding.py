"""
=======================================
SQLAlchemy hand-off for built statements.
=======================================

Converts a ``(statement, params)`` pair produced by the builder into a
SQLAlchemy ``TextClause`` that any ``Connection.execute()`` call accepts.
Positional ``?`` placeholders become named binds ``:p0``, ``:p1``, ... in
order of appearance. Colons already present in the statement (string
literals, ``::`` casts) are escaped so they stay literal. No connection is
opened here.

Usage:
    from sqlalchemy import create_engine
    from fluent_sql.binding import to_text_clause

    statement, params = builder.build()
    with engine.connect() as conn:
        rows = conn.execute(to_text_clause(statement, params)).fetchall()
"""

from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from core.logger import get_logger
from fluent_sql.debug_renderer import PLACEHOLDER

logger = get_logger(__name__)

BIND_PREFIX = 'p'


class ParameterBindingError(Exception):
    """Exception raised when placeholders and parameters do not line up."""
    pass


def to_text_clause(statement: str, params: Sequence[Any]) -> TextClause:
    """
    Build a SQLAlchemy TextClause with named bind parameters.

    Args:
        statement: Statement text with positional placeholders
        params: Parameter values in bind order

    Returns:
        TextClause with every parameter bound

    Raises:
        ParameterBindingError: If the placeholder count differs from the
            number of parameters
    """
    placeholder_count = statement.count(PLACEHOLDER)
    if placeholder_count != len(params):
        raise ParameterBindingError(
            f"Statement has {placeholder_count} placeholder(s) "
            f"but {len(params)} parameter(s) were supplied"
        )

    # Colons already in the fragments are literal text, not bind names
    pieces = [piece.replace(':', '\\:') for piece in statement.split(PLACEHOLDER)]
    named = pieces[0]
    for index, piece in enumerate(pieces[1:]):
        named += f":{BIND_PREFIX}{index}" + piece

    clause = text(named)
    if params:
        clause = clause.bindparams(
            **{f"{BIND_PREFIX}{index}": value for index, value in enumerate(params)}
        )

    logger.debug(f"Bound {len(params)} parameter(s) to text clause")
    return clause
