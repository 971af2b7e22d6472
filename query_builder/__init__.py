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

"""Sort queries from request parameters, validated against a list of allowed sorts."""

__version__ = "1.0.0"

from query_builder.builder import Page, QueryBuilder, SortConfig, apply_sorts
from query_builder.datasource import DataSource, FindAndCountResult, SQLAlchemyDataSource
from query_builder.errors import InvalidSortQueryError
from query_builder.query import QueryLike, QuerySpec, merge_query
from query_builder.settings import app_settings
from query_builder.sorting import AllowedSort, CustomSort, FieldSort, Sort, SortOrder

__all__ = [
    "AllowedSort",
    "CustomSort",
    "DataSource",
    "FieldSort",
    "FindAndCountResult",
    "InvalidSortQueryError",
    "Page",
    "QueryBuilder",
    "QueryLike",
    "QuerySpec",
    "SQLAlchemyDataSource",
    "Sort",
    "SortConfig",
    "SortOrder",
    "app_settings",
    "apply_sorts",
    "merge_query",
]
