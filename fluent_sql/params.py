"""
==============================
Bind parameter classification.
==============================

Bind parameters are accepted as plain Python values and stored unchanged in
the builder. For diagnostics they are classified into a closed set of kinds
so that debug formatting is decided in exactly one place.

Kinds:
- STRING: ``str`` values, rendered as single-quoted literals
- TIMESTAMP: ``datetime.datetime`` values, rendered as 'YYYY-MM-DD HH:MM:SS'
- NULL: ``None``, rendered as NULL
- OTHER: anything else, rendered with ``str()``

Usage:
    from fluent_sql.params import QueryParam

    QueryParam.of("bob").render()   # "'bob'"
    QueryParam.of(None).render()    # "NULL"
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class ParamKind(Enum):
    """Closed set of parameter kinds known to the debug renderer."""

    STRING = 'string'
    TIMESTAMP = 'timestamp'
    NULL = 'null'
    OTHER = 'other'


@dataclass(frozen=True)
class QueryParam:
    """A bind parameter value tagged with its kind.

    Attributes:
        kind: Classification used for debug formatting
        value: The original value as passed by the caller
    """

    kind: ParamKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> 'QueryParam':
        """Classify a raw parameter value.

        Args:
            value: Any bind parameter value

        Returns:
            QueryParam tagged with the matching kind
        """
        if value is None:
            return cls(ParamKind.NULL, None)
        if isinstance(value, str):
            return cls(ParamKind.STRING, value)
        # datetime before anything broader; date alone is not a timestamp
        if isinstance(value, datetime):
            return cls(ParamKind.TIMESTAMP, value)
        return cls(ParamKind.OTHER, value)

    def render(self) -> str:
        """Format the value as a literal-looking SQL fragment.

        Quotes are not escaped: the output is for human inspection only.
        """
        if self.kind is ParamKind.STRING:
            return f"'{self.value}'"
        if self.kind is ParamKind.TIMESTAMP:
            return f"'{self.value.strftime(TIMESTAMP_FORMAT)}'"
        if self.kind is ParamKind.NULL:
            return 'NULL'
        return str(self.value)
