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
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from query_builder.query import QuerySpec

RowType = TypeVar("RowType")


@dataclass
class FindAndCountResult(Generic[RowType]):
    count: int
    rows: Sequence[RowType]


class DataSource(Protocol[RowType]):
    """Executes a finished QuerySpec, the query builder only ever awaits one of these per request."""

    async def find_all(self, query: QuerySpec) -> Sequence[RowType]: ...

    async def find_one(self, query: QuerySpec) -> RowType | None: ...

    async def find_and_count_all(self, query: QuerySpec) -> FindAndCountResult[RowType]: ...


__all__ = ["DataSource", "FindAndCountResult", "RowType"]
