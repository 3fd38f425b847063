"""
Shared fixtures
Provides a stand-in for the Supabase client that records query calls
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


CHAIN_METHODS = ("select", "eq", "ilike", "in_", "order", "range", "insert")


def _make_query(data=None, count=None, error=None, responses=None):
    """
    Build a chainable query mock whose execute() returns the given rows

    responses: list of row lists, one per successive execute() call
    """
    query = MagicMock(name="query")
    for method in CHAIN_METHODS:
        getattr(query, method).return_value = query

    if error is not None:
        query.execute.side_effect = error
    elif responses is not None:
        query.execute.side_effect = [SimpleNamespace(data=rows, count=None) for rows in responses]
    else:
        query.execute.return_value = SimpleNamespace(data=data or [], count=count)
    return query


class _QueryRegistry(dict):
    """Table name -> query mock; unregistered tables get a default empty query"""

    def __missing__(self, name):
        query = self[name] = _make_query()
        return query


@pytest.fixture
def fake_db():
    """
    Supabase client mock keyed by table name

    Tests register a query per table via fake_db.queries[name] = make_query(...).
    """
    db = MagicMock(name="supabase")
    db.queries = _QueryRegistry()

    def table(name):
        return db.queries[name]

    db.table.side_effect = table
    return db


@pytest.fixture
def make_query():
    """Factory for chainable query mocks"""
    return _make_query
