"""
=====================================================
Fluent SQL statement builder.
=====================================================

This package assembles SELECT statement text and a positional bind parameter
list from chained clause fragments. It never connects to a database: the
``(statement, params)`` pair is handed to a separate execution layer.

The package follows a clear organization:
    - query_builder.py: QueryBuilder, union, with_recursive
    - params.py: Parameter classification for diagnostics
    - debug_renderer.py: Inline parameters into placeholders for inspection
    - binding.py: Convert built statements into SQLAlchemy TextClause objects

Example:
    >>> from fluent_sql import QueryBuilder, union
    >>>
    >>> active = QueryBuilder().select('id').from_('users').where('active = ?', True)
    >>> banned = QueryBuilder().select('id').from_('bans').where('until > ?', 0)
    >>> combined = union(active, banned)
    >>> combined.from_source
    '(SELECT id FROM users WHERE active = ?) UNION ALL (SELECT id FROM bans WHERE until > ?)'
"""

__version__ = "1.0.0"
__all__ = [
    'QueryBuilder', 'union', 'with_recursive',
    'ParamKind', 'QueryParam',
    'replace_query_params', 'log_debug_query',
    'to_text_clause', 'ParameterBindingError'
]

from .binding import ParameterBindingError, to_text_clause
from .debug_renderer import log_debug_query, replace_query_params
from .params import ParamKind, QueryParam
from .query_builder import QueryBuilder, union, with_recursive
