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
from collections.abc import Sequence
from typing import Any, Generic

import structlog
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import expression
from starlette.concurrency import run_in_threadpool

from query_builder.datasource.base import FindAndCountResult, RowType
from query_builder.query import OrderItem, QuerySpec
from query_builder.sorting import SortOrder

logger = structlog.get_logger(__name__)


class SQLAlchemyDataSource(Generic[RowType]):
    """Data source for a SQLAlchemy ORM model.

    Supported QuerySpec options:
        where: list of SQL expressions the statement is restricted with
        loader_options: list of loader options (e.g. `selectinload(User.posts)`)

    Statements are executed on the (synchronous) session in a threadpool.
    """

    def __init__(self, model: type[RowType], session: Session) -> None:
        self.model = model
        self.session = session

    def _order_by_clause(self, item: OrderItem) -> Any:
        column, order = item
        if isinstance(column, str):
            column = self.model.__mapper__.all_orm_descriptors.get(column)  # type: ignore[attr-defined]
            if column is None:
                raise ValueError(f"Unable to sort on unknown field: {item[0]}")
        sa_sort = expression.desc if order == SortOrder.DESC else expression.asc
        return sa_sort(column)

    def statement(self, query: QuerySpec) -> Select:
        stmt = select(self.model)
        if where := query.options.get("where"):
            stmt = stmt.where(*where)
        if loader_options := query.options.get("loader_options"):
            stmt = stmt.options(*loader_options)
        if query.order:
            stmt = stmt.order_by(*[self._order_by_clause(item) for item in query.order])
        return stmt

    def _paginated(self, stmt: Select, query: QuerySpec) -> Select:
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        if query.offset is not None:
            stmt = stmt.offset(query.offset)
        return stmt

    def _find_all(self, query: QuerySpec) -> Sequence[RowType]:
        stmt = self._paginated(self.statement(query), query)
        return self.session.scalars(stmt).unique().all()

    def _find_one(self, query: QuerySpec) -> RowType | None:
        stmt = self.statement(query).offset(query.offset).limit(1)
        return self.session.scalars(stmt).unique().first()

    def _find_and_count_all(self, query: QuerySpec) -> FindAndCountResult[RowType]:
        stmt = self.statement(query)
        count = self.session.scalar(select(func.count()).select_from(stmt.order_by(None).subquery()))
        rows = self.session.scalars(self._paginated(stmt, query)).unique().all()
        return FindAndCountResult(count=count or 0, rows=rows)

    async def find_all(self, query: QuerySpec) -> Sequence[RowType]:
        logger.debug("find_all() called", model=self.model.__name__, order=query.order, limit=query.limit)
        return await run_in_threadpool(self._find_all, query)

    async def find_one(self, query: QuerySpec) -> RowType | None:
        logger.debug("find_one() called", model=self.model.__name__, order=query.order)
        return await run_in_threadpool(self._find_one, query)

    async def find_and_count_all(self, query: QuerySpec) -> FindAndCountResult[RowType]:
        logger.debug(
            "find_and_count_all() called",
            model=self.model.__name__,
            order=query.order,
            limit=query.limit,
            offset=query.offset,
        )
        return await run_in_threadpool(self._find_and_count_all, query)
