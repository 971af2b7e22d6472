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
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from query_builder.sorting.sorting import SortOrder

CustomSortFunction = Callable[[Any, SortOrder], Any]


@dataclass(frozen=True)
class FieldSort:
    """Sort key backed by a column, `column_name` may differ from the name clients use."""

    name: str
    column_name: str


@dataclass(frozen=True)
class CustomSort:
    """Sort key backed by a function that receives the query and the requested order and returns the new query."""

    name: str
    sort_fn: CustomSortFunction


AllowedSortType = FieldSort | CustomSort


class AllowedSort:
    @staticmethod
    def field(name: str, column_name: str | None = None) -> FieldSort:
        return FieldSort(name=name, column_name=column_name or name)

    @staticmethod
    def custom(name: str, sort_fn: CustomSortFunction) -> CustomSort:
        return CustomSort(name=name, sort_fn=sort_fn)

    @staticmethod
    def fields(*names: str) -> list[FieldSort]:
        return [AllowedSort.field(name) for name in names]


def allowed_sorts_by_name(*sorts: str | AllowedSortType) -> dict[str, AllowedSortType]:
    """Map sort names to their descriptor, plain strings become a FieldSort on the column with the same name.

    >>> allowed_sorts_by_name("name", AllowedSort.field("email", "email_address"))
    {'name': FieldSort(name='name', column_name='name'), 'email': FieldSort(name='email', column_name='email_address')}
    """
    return {sort.name: sort for sort in (AllowedSort.field(s) if isinstance(s, str) else s for s in sorts)}
