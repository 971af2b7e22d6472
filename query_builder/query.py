# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Protocol, runtime_checkable

from sqlalchemy.sql import ColumnElement

from query_builder.sorting import SortOrder

OrderItem = tuple[str | ColumnElement, SortOrder]


@runtime_checkable
class QueryLike(Protocol):
    """What the query builder needs from a query: an ordered `order` list.

    Custom sorts may return any object satisfying this protocol (or a mapping with an "order" key),
    it replaces the builder's query as-is.
    """

    order: list[OrderItem]


AnyQuery = QueryLike | Mapping[str, Any]


@dataclass
class QuerySpec:
    """Describes how to fetch data from a data source.

    `order` holds `(column, order)` pairs where the column is either the name of an attribute
    on the model or a SQL expression (e.g. `literal_column("post_count")`).
    `options` are passed on untouched, a data source decides what to do with them.
    """

    order: list[OrderItem] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def merge(self, **options: Any) -> "QuerySpec":
        """Return a copy with `order`/`limit`/`offset` replaced and any other keyword merged into `options`.

        >>> QuerySpec(limit=10).merge(offset=20, where=[])
        QuerySpec(order=[], limit=10, offset=20, options={'where': []})
        """
        order = list(options.pop("order", self.order))
        limit = options.pop("limit", self.limit)
        offset = options.pop("offset", self.offset)
        return replace(self, order=order, limit=limit, offset=offset, options=self.options | options)


def query_order(query: AnyQuery) -> list[OrderItem]:
    if isinstance(query, Mapping):
        return list(query.get("order") or [])
    return list(getattr(query, "order", None) or [])


def merge_query(query: AnyQuery, **options: Any) -> Any:
    """Return a new query derived from `query` with `options` set, whatever shape the query has.

    Queries with a `merge` method (like QuerySpec) are merged, mappings get the options as keys
    and other objects are copied with the options set as attributes.

    >>> merge_query({"order": [], "include": ["posts"]}, limit=5)
    {'order': [], 'include': ['posts'], 'limit': 5}
    """
    if callable(getattr(query, "merge", None)):
        return query.merge(**options)  # type: ignore[union-attr]
    if isinstance(query, Mapping):
        return {**query, **options}

    query = copy.copy(query)
    for key, value in options.items():
        setattr(query, key, value)
    return query
