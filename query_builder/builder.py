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
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic

import structlog
from sqlalchemy.orm import Session

from query_builder.datasource import DataSource, RowType, SQLAlchemyDataSource
from query_builder.errors import InvalidSortQueryError
from query_builder.query import AnyQuery, OrderItem, QuerySpec, merge_query, query_order
from query_builder.settings import app_settings
from query_builder.sorting import (
    AllowedSortType,
    CustomSort,
    FieldSort,
    allowed_sorts_by_name,
    generic_sorts_validate,
    parse_sorts,
)

logger = structlog.get_logger(__name__)

DefaultSort = str | tuple[str, ...]


@dataclass(frozen=True)
class SortConfig:
    allowed_sorts: Mapping[str, AllowedSortType] = field(default_factory=dict)
    default_sort: DefaultSort | None = None


def apply_sorts(query: AnyQuery, params: Mapping[str, Any], config: SortConfig) -> AnyQuery:
    """Apply the sort requested in `params` (or the configured default sort) to the query.

    Args:
        query: The query to sort, it is not modified.
        params: The request parameters, only the sort parameter (`app_settings.SORT_PARAM`) is read.
        config: The allowed sorts and default sort. An empty allow-list accepts any field.

    Returns the sorted query. This is whatever the last custom sort returned, with the field sorts
    appended to its existing order.

    Raises:
        InvalidSortQueryError: when any requested field is not allowed, before any sort is applied.
    """
    sort_input = params.get(app_settings.SORT_PARAM) or config.default_sort
    if not sort_input:
        return query

    sort_by = parse_sorts(sort_input)
    invalid_sort_items, valid_sort_items = generic_sorts_validate(config.allowed_sorts)(sort_by)
    if invalid_list := [item.field for item in invalid_sort_items]:
        valid_sort_keys = list(config.allowed_sorts)
        logger.info("Invalid sort arguments", invalid_sorting=invalid_list, valid_sort_keys=valid_sort_keys)
        raise InvalidSortQueryError(invalid_list, valid_sort_keys)

    logger.debug("Applying sorts", sort=[(item.field, item.order.value) for item in sort_by])
    query = merge_query(query, order=query_order(query))
    order: list[OrderItem] = []
    for item in valid_sort_items:
        match config.allowed_sorts.get(item.field):
            case CustomSort(sort_fn=sort_fn):
                query = sort_fn(query, item.order)
            case FieldSort(column_name=column_name):
                order.append((column_name, item.order))
            case None:
                order.append((item.field, item.order))

    if order:
        query = merge_query(query, order=[*query_order(query), *order])
    return query


@dataclass
class Page(Generic[RowType]):
    data: Sequence[RowType]
    total: int
    page: int
    per_page: int


@dataclass(frozen=True)
class QueryBuilder(Generic[RowType]):
    """Sorts a query from request parameters and executes it on a data source.

    Every configuration method returns a new builder, so a configured builder can serve as a template:

        users = QueryBuilder.for_model(User, session).allowed_sorts("name", AllowedSort.field("email", "email_address"))
        page = await users.default_sort("-created_at").apply_sorts(request_params).paginate(2, 25)
    """

    data_source: DataSource[RowType]
    query: AnyQuery = field(default_factory=QuerySpec)
    config: SortConfig = field(default_factory=SortConfig)

    @classmethod
    def for_source(cls, data_source: DataSource[RowType], query: AnyQuery | None = None) -> "QueryBuilder[RowType]":
        return cls(data_source=data_source, query=query if query is not None else QuerySpec())

    @classmethod
    def for_model(
        cls, model: type[RowType], session: Session, query: AnyQuery | None = None
    ) -> "QueryBuilder[RowType]":
        return cls.for_source(SQLAlchemyDataSource(model, session), query)

    @property
    def allowed_sort_names(self) -> list[str]:
        return list(self.config.allowed_sorts)

    def allowed_sorts(self, *sorts: str | AllowedSortType) -> "QueryBuilder[RowType]":
        allowed = dict(self.config.allowed_sorts) | allowed_sorts_by_name(*sorts)
        return replace(self, config=replace(self.config, allowed_sorts=allowed))

    def default_sort(self, *sorts: str) -> "QueryBuilder[RowType]":
        default_sort = sorts[0] if len(sorts) == 1 else sorts
        return replace(self, config=replace(self.config, default_sort=default_sort))

    def apply_sorts(self, params: Mapping[str, Any]) -> "QueryBuilder[RowType]":
        return replace(self, query=apply_sorts(self.query, params, self.config))

    def build(self) -> AnyQuery:
        return self.query

    async def get(self) -> Sequence[RowType]:
        return await self.data_source.find_all(self.query)

    async def first(self) -> RowType | None:
        return await self.data_source.find_one(self.query)

    async def paginate(self, page: int | None = None, per_page: int | None = None) -> Page[RowType]:
        page = page if page is not None else app_settings.DEFAULT_PAGE
        per_page = per_page if per_page is not None else app_settings.DEFAULT_PER_PAGE
        offset = (page - 1) * per_page

        result = await self.data_source.find_and_count_all(merge_query(self.query, limit=per_page, offset=offset))
        return Page(data=result.rows, total=result.count, page=page, per_page=per_page)
