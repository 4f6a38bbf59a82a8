"""
Shared fixtures for fluent_sql tests.

Key fixtures:
- builder: an empty QueryBuilder
- users_query: a builder over the users table with one bound WHERE condition
- orders_query: a builder over the orders table with a parameterised JOIN
"""

import pytest

from fluent_sql.query_builder import QueryBuilder


@pytest.fixture
def builder():
    """Provide an empty QueryBuilder."""
    return QueryBuilder()


@pytest.fixture
def users_query():
    """Builder selecting active users by minimum age."""
    return (
        QueryBuilder()
        .select('id', 'name')
        .from_('users')
        .where('age > ?', 18)
    )


@pytest.fixture
def orders_query():
    """Builder selecting paid orders joined to customers in a country."""
    return (
        QueryBuilder()
        .select('o.id')
        .from_('orders o')
        .join('JOIN customers c ON c.id = o.customer_id AND c.country = ?', 'NL')
        .where('o.status = ?', 'paid')
    )
