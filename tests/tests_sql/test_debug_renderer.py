"""
===================================================================
Pytest suite for fluent_sql/debug_renderer.py and fluent_sql/params.py
===================================================================

Sections:
---------
1. Unit tests - Parameter classification and formatting
2. Unit tests - Placeholder substitution
3. Edge case tests - Placeholder/parameter count mismatches

Available markers:
------------------
unit, edge_case, regression

How to Execute:
---------------
All tests:          pytest tests/tests_sql/test_debug_renderer.py -v
By category:        pytest tests/tests_sql/test_debug_renderer.py -m edge_case
"""

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from fluent_sql.debug_renderer import log_debug_query, replace_query_params
from fluent_sql.params import ParamKind, QueryParam

# ==========================================
# 1. UNIT TESTS - Parameter classification
# ==========================================


@pytest.mark.unit
@pytest.mark.parametrize("value, kind", [
    ("bob", ParamKind.STRING),
    ("", ParamKind.STRING),
    (datetime(2024, 3, 9, 7, 5, 1), ParamKind.TIMESTAMP),
    (None, ParamKind.NULL),
    (42, ParamKind.OTHER),
    (3.5, ParamKind.OTHER),
    (True, ParamKind.OTHER),
    (date(2024, 3, 9), ParamKind.OTHER),
    (Decimal('9.99'), ParamKind.OTHER),
])
def test_query_param_classification(value, kind):
    """Values are tagged with the expected kind and kept unchanged."""
    param = QueryParam.of(value)

    assert param.kind is kind
    assert param.value == value


@pytest.mark.unit
@pytest.mark.parametrize("value, expected", [
    ("bob", "'bob'"),
    (datetime(2024, 3, 9, 7, 5, 1, 999), "'2024-03-09 07:05:01'"),
    (None, "NULL"),
    (7, "7"),
    (Decimal('9.99'), "9.99"),
    (True, "True"),
])
def test_query_param_render(value, expected):
    """Each kind renders as its literal-looking form."""
    assert QueryParam.of(value).render() == expected


@pytest.mark.unit
def test_string_quotes_not_escaped():
    """Embedded quotes are left as-is since output is for reading only."""
    assert QueryParam.of("O'Brien").render() == "'O'Brien'"


# ======================================
# 2. UNIT TESTS - Placeholder substitution
# ======================================


@pytest.mark.unit
def test_replace_query_params_basic():
    """Parameters replace placeholders left to right."""
    result = replace_query_params("WHERE id = ? AND name = ?", [7, "bob"])

    assert result == "WHERE id = 7 AND name = 'bob'"


@pytest.mark.unit
def test_replace_query_params_mixed_kinds():
    """Timestamps and None are formatted in place."""
    result = replace_query_params(
        "INSERT INTO t VALUES (?, ?, ?)",
        [datetime(2023, 12, 31, 23, 59, 59), None, 1.5]
    )

    assert result == "INSERT INTO t VALUES ('2023-12-31 23:59:59', NULL, 1.5)"


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "SELECT 1", "WHERE a = ? AND b = ?", "100% ?"])
def test_replace_query_params_identity_without_params(text):
    """With no parameters the text is returned unchanged."""
    assert replace_query_params(text, []) == text


@pytest.mark.unit
def test_log_debug_query_returns_and_logs(caplog):
    """log_debug_query() logs and returns the rendered statement."""
    with caplog.at_level(logging.DEBUG, logger='fluent_sql.debug_renderer'):
        rendered = log_debug_query("SELECT * FROM t WHERE id = ?", [3])

    assert rendered == "SELECT * FROM t WHERE id = 3"
    assert caplog.messages == ["SELECT * FROM t WHERE id = 3"]


# ==================
# 3. EDGE CASES
# ==================


@pytest.mark.edge_case
def test_surplus_params_dropped():
    """Parameters without a placeholder are silently ignored."""
    assert replace_query_params("id = ?", [1, 2, 3]) == "id = 1"


@pytest.mark.edge_case
def test_surplus_placeholders_remain():
    """Placeholders without a parameter stay in the text."""
    assert replace_query_params("a = ? AND b = ? AND c = ?", [1]) == "a = 1 AND b = ? AND c = ?"


@pytest.mark.edge_case
def test_question_mark_in_value_consumed_by_next_param():
    """A '?' inside a substituted value is the next first occurrence."""
    result = replace_query_params("a = ? AND b = ?", ["why?", 2])

    assert result == "a = 'why2' AND b = ?"


@pytest.mark.regression
def test_percent_sequences_logged_verbatim(caplog):
    """Rendered text is logged as data, not as a format string."""
    with caplog.at_level(logging.DEBUG, logger='fluent_sql.debug_renderer'):
        log_debug_query("WHERE pct LIKE ? AND note = '%(name)s'", ["50%s"])

    assert caplog.messages == ["WHERE pct LIKE '50%s' AND note = '%(name)s'"]
