"""
============================
Fluent SQL SELECT builder.
============================

This module provides a chainable builder that collects clause fragments and
positional bind parameters, and renders them into a single SELECT statement
plus its parameter list. Nothing is executed.

Builder methods (all return the builder):
- select, from_, join, where, group_by, order_by, limit, offset
- having, raw (stored but not rendered)
- debug (writes the inlined statement to the debug log)

Rendering:
- build / get_query: statement text and parameters
- build_count: COUNT(*) statement sharing FROM/JOIN/WHERE
- sub_query: parenthesised and aliased statement text

Combinators:
- union: UNION ALL of several builders
- with_recursive: recursive CTE wrapper

Clauses are rendered in a fixed order regardless of call order:
SELECT, FROM, JOIN, WHERE, GROUP BY, ORDER BY, LIMIT, OFFSET. Parameters are
returned in the order they were added, so callers must add placeholders in
the same order they appear in that rendering.

HAVING, WITH and raw fragments are collected but never rendered, while their
parameters are still returned by build().

A builder is not safe to mutate from several threads at once.

Usage:
    from fluent_sql.query_builder import QueryBuilder

    query, params = (
        QueryBuilder()
        .select('u.id', 'u.name')
        .from_('users u')
        .join('LEFT JOIN orders o ON o.user_id = u.id AND o.status = ?', 'paid')
        .where('u.active = ?', True)
        .order_by('u.name')
        .limit(20)
        .offset(40)
        .build()
    )
    # SELECT u.id, u.name FROM users u LEFT JOIN orders o ON ... WHERE u.active = ?
    #   ORDER BY u.name LIMIT 20 OFFSET 40
    # ['paid', True]
"""

from typing import Any, List, Optional, Tuple

from sqlalchemy.sql.elements import TextClause

from core.logger import get_logger
from fluent_sql.binding import to_text_clause
from fluent_sql.debug_renderer import log_debug_query

logger = get_logger(__name__)

COUNT_SELECT = "SELECT COUNT(*) as count"


class QueryBuilder:
    """Mutable store of clause fragments and bind parameters.

    Every mutator appends (or, for from_/limit/offset, overwrites) and returns
    the same instance so calls can be chained. Rendering never mutates the
    builder and may be repeated.

    Example:
        >>> qb = QueryBuilder().from_('t').where('id = ?', 7)
        >>> qb.build()
        ('SELECT * FROM t WHERE id = ?', [7])
    """

    def __init__(self):
        self._select: List[str] = []
        self._from: str = ""
        self._joins: List[str] = []
        self._where: List[str] = []
        self._group_by: List[str] = []
        self._order_by: List[str] = []
        self._limit: int = 0
        self._offset: int = 0
        self._params: List[Any] = []
        self._having: Optional[List[str]] = None
        self._with: List[str] = []
        self._raw: List[str] = []

    def __repr__(self) -> str:
        return f"QueryBuilder({self.string()!r}, params={self._params!r})"

    def __str__(self) -> str:
        return self.string()

    # ==================
    # Clause state
    # ==================

    @property
    def select_columns(self) -> List[str]:
        return list(self._select)

    @property
    def from_source(self) -> str:
        return self._from

    @property
    def join_fragments(self) -> List[str]:
        return list(self._joins)

    @property
    def where_conditions(self) -> List[str]:
        return list(self._where)

    @property
    def group_by_columns(self) -> List[str]:
        return list(self._group_by)

    @property
    def order_by_expressions(self) -> List[str]:
        return list(self._order_by)

    @property
    def having_conditions(self) -> List[str]:
        return list(self._having or [])

    @property
    def with_fragments(self) -> List[str]:
        return list(self._with)

    @property
    def raw_fragments(self) -> List[str]:
        return list(self._raw)

    @property
    def limit_value(self) -> int:
        return self._limit

    @property
    def offset_value(self) -> int:
        return self._offset

    @property
    def parameters(self) -> List[Any]:
        return list(self._params)

    # ==================
    # Mutators
    # ==================

    def select(self, *columns: str) -> 'QueryBuilder':
        """Add columns to the SELECT list; none at all renders as ``*``."""
        self._select.extend(columns)
        return self

    def from_(self, table: str) -> 'QueryBuilder':
        """Set the FROM source, replacing any previous one."""
        self._from = table
        return self

    def join(self, join: str, *params: Any) -> 'QueryBuilder':
        """
        Add a join fragment.

        Args:
            join: Complete clause including its JOIN keyword,
                e.g. ``'LEFT JOIN orders o ON o.user_id = u.id'``
            *params: Values for placeholders inside the fragment
        """
        self._joins.append(join)
        self._params.extend(params)
        return self

    def where(self, condition: str, *params: Any) -> 'QueryBuilder':
        """
        Add a WHERE condition; conditions are combined with AND.

        Args:
            condition: Boolean expression, e.g. ``'age > ?'``
            *params: Values for placeholders inside the condition
        """
        self._where.append(condition)
        self._params.extend(params)
        return self

    def group_by(self, *columns: str) -> 'QueryBuilder':
        self._group_by.extend(columns)
        return self

    def order_by(self, order: str) -> 'QueryBuilder':
        self._order_by.append(order)
        return self

    def limit(self, limit: int) -> 'QueryBuilder':
        """Set LIMIT; values <= 0 mean no limit."""
        self._limit = limit
        return self

    def offset(self, offset: int) -> 'QueryBuilder':
        """Set OFFSET; only rendered together with a positive limit."""
        self._offset = offset
        return self

    def having(self, condition: str, *params: Any) -> 'QueryBuilder':
        """
        Record a HAVING condition.

        The condition is stored but not rendered by build(); its parameters
        are still appended to the parameter list.
        """
        if self._having is None:
            self._having = []
        self._having.append(condition)
        self._params.extend(params)
        return self

    def raw(self, sql: str, *params: Any) -> 'QueryBuilder':
        """
        Record a raw SQL fragment.

        Like having(), the fragment is stored but not rendered, and its
        parameters are appended to the parameter list.
        """
        self._raw.append(sql)
        self._params.extend(params)
        return self

    # ==================
    # Rendering
    # ==================

    def _source_parts(self) -> List[str]:
        parts = [f"FROM {self._from}"]

        if self._joins:
            parts.append(" ".join(self._joins))

        if self._where:
            parts.append("WHERE " + " AND ".join(self._where))

        return parts

    def build(self) -> Tuple[str, List[Any]]:
        """
        Render the statement.

        Returns:
            Tuple of (statement text, copy of all parameters in call order)
        """
        if self._select:
            parts = ["SELECT " + ", ".join(self._select)]
        else:
            parts = ["SELECT *"]

        parts.extend(self._source_parts())

        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))

        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))

        # OFFSET is never emitted without a positive LIMIT
        if self._limit > 0:
            parts.append(f"LIMIT {self._limit}")
            if self._offset > 0:
                parts.append(f"OFFSET {self._offset}")

        return " ".join(parts), list(self._params)

    def build_count(self) -> Tuple[str, List[Any]]:
        """
        Render a row-count statement for pagination totals.

        Uses the same FROM, JOIN and WHERE clauses as build() and ignores
        the select list, GROUP BY, ORDER BY, LIMIT and OFFSET.

        Returns:
            Tuple of (statement text, copy of all parameters in call order)
        """
        parts = [COUNT_SELECT]
        parts.extend(self._source_parts())
        return " ".join(parts), list(self._params)

    def get_query(self) -> Tuple[str, List[Any]]:
        """Alias of build()."""
        return self.build()

    def string(self) -> str:
        """Statement text only."""
        query, _ = self.build()
        return query

    def params(self) -> List[Any]:
        """Parameters only."""
        _, params = self.build()
        return params

    def sub_query(self, alias: str) -> str:
        """
        Render the statement as an aliased subquery, e.g. ``(SELECT ...) AS t``.

        Parameters are not returned; callers embedding the subquery must
        carry them over with params().
        """
        query, _ = self.build()
        return "(" + query + ") AS " + alias

    def debug(self) -> 'QueryBuilder':
        """Write the statement with parameters inlined to the debug log."""
        query, params = self.get_query()
        log_debug_query(query, params)
        return self

    def to_text_clause(self) -> TextClause:
        """Build and convert to a SQLAlchemy TextClause with named binds."""
        return to_text_clause(*self.build())


def union(*queries: QueryBuilder) -> QueryBuilder:
    """
    Combine statements with UNION ALL.

    The combined text ``(q1) UNION ALL (q2) ...`` is stored as the FROM
    source of a new builder and the parameters are concatenated in input
    order. Read it back with ``from_source``/``parameters``; calling build()
    on the result prefixes ``SELECT * FROM``.

    Args:
        *queries: Builders to combine, in order

    Returns:
        New QueryBuilder holding the combined statement
    """
    union_parts = []
    all_params: List[Any] = []

    for index, query in enumerate(queries):
        sql, params = query.build()
        union_parts.append("(" + sql + ")")
        all_params.extend(params)

        if index < len(queries) - 1:
            union_parts.append("UNION ALL")

    result = QueryBuilder()
    result._from = " ".join(union_parts)
    result._params = all_params
    logger.debug(f"Combined {len(queries)} statement(s) with UNION ALL")
    return result


def with_recursive(name: str, query: QueryBuilder) -> QueryBuilder:
    """
    Wrap a statement as ``WITH RECURSIVE <name> AS (...)``.

    The CTE text is stored in the new builder's with_fragments and the
    parameters are copied over. build() does not emit WITH fragments.

    Args:
        name: CTE name
        query: Builder holding the CTE body

    Returns:
        New QueryBuilder holding the CTE fragment
    """
    sql, params = query.build()
    result = QueryBuilder()
    result._with.append(f"WITH RECURSIVE {name} AS ({sql})")
    result._params.extend(params)
    return result
