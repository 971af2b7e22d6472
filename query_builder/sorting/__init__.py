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
from query_builder.sorting.allowed_sort import (
    AllowedSort,
    AllowedSortType,
    CustomSort,
    CustomSortFunction,
    FieldSort,
    allowed_sorts_by_name,
)
from query_builder.sorting.sorting import Sort, SortOrder, generic_sorts_validate, parse_sort, parse_sorts, sort_strings

__all__ = [
    "AllowedSort",
    "AllowedSortType",
    "CustomSort",
    "CustomSortFunction",
    "FieldSort",
    "Sort",
    "SortOrder",
    "allowed_sorts_by_name",
    "generic_sorts_validate",
    "parse_sort",
    "parse_sorts",
    "sort_strings",
]
