from types import SimpleNamespace

from sqlalchemy import literal_column

from query_builder import QueryLike, QuerySpec, SortOrder, merge_query
from query_builder.query import query_order


def test_merge_returns_copy():
    query = QuerySpec(order=[("name", SortOrder.ASC)], limit=10, options={"where": []})

    merged = query.merge(offset=20, loader_options=[])

    assert merged == QuerySpec(
        order=[("name", SortOrder.ASC)], limit=10, offset=20, options={"where": [], "loader_options": []}
    )
    assert query == QuerySpec(order=[("name", SortOrder.ASC)], limit=10, options={"where": []})
    assert merged.order is not query.order


def test_merge_order_with_expression():
    post_count = literal_column("post_count")

    merged = QuerySpec().merge(order=[(post_count, SortOrder.DESC)])

    assert merged.order == [(post_count, SortOrder.DESC)]


def test_query_like():
    assert isinstance(QuerySpec(), QueryLike)
    assert not isinstance(object(), QueryLike)
    assert isinstance(SimpleNamespace(order=[]), QueryLike)


def test_query_order():
    order = [("name", SortOrder.ASC)]

    assert query_order(QuerySpec(order=order)) == order
    assert query_order(SimpleNamespace(order=order)) == order
    assert query_order({"order": order}) == order
    assert query_order({}) == []
    assert query_order(SimpleNamespace()) == []
    assert query_order(QuerySpec(order=order)) is not order


def test_merge_query_uses_merge():
    query = QuerySpec(limit=10)

    merged = merge_query(query, offset=5)

    assert merged == QuerySpec(limit=10, offset=5)
    assert query.offset is None


def test_merge_query_mapping():
    query = {"order": [], "include": ["posts"]}

    merged = merge_query(query, order=[("name", SortOrder.DESC)], limit=5)

    assert merged == {"order": [("name", SortOrder.DESC)], "include": ["posts"], "limit": 5}
    assert query == {"order": [], "include": ["posts"]}


def test_merge_query_copies_object():
    query = SimpleNamespace(order=[], include=["posts"])

    merged = merge_query(query, order=[("name", SortOrder.ASC)])

    assert merged is not query
    assert merged.order == [("name", SortOrder.ASC)]
    assert merged.include == ["posts"]
    assert query.order == []
