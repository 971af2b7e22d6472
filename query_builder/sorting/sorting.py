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

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from more_itertools import partition
from pydantic import BaseModel, ConfigDict

DESCENDING_PREFIX = "-"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    field: str
    order: SortOrder

    model_config = ConfigDict(frozen=True)


def sort_strings(sort_input: Any) -> list[str]:
    """Normalize the raw sort input of a request into an ordered list of sort tokens.

    Lists are taken as-is, comma separated strings are split (and stripped) and a single
    string becomes a single token. Anything else yields no tokens. Empty and non-string
    tokens are dropped.

    >>> sort_strings("name, -created_at")
    ['name', '-created_at']
    >>> sort_strings(["-name", "", None])
    ['-name']
    >>> sort_strings(42)
    []
    """
    if isinstance(sort_input, (list, tuple)):
        tokens = list(sort_input)
    elif isinstance(sort_input, str):
        tokens = [token.strip() for token in sort_input.split(",")] if "," in sort_input else [sort_input]
    else:
        return []

    return [token for token in tokens if isinstance(token, str) and token]


def parse_sort(token: str) -> Sort:
    if token.startswith(DESCENDING_PREFIX):
        return Sort(field=token[len(DESCENDING_PREFIX) :], order=SortOrder.DESC)
    return Sort(field=token, order=SortOrder.ASC)


def parse_sorts(sort_input: Any) -> list[Sort]:
    """Parse raw sort input (e.g. `"name,-created_at"`) into Sort items, keeping precedence order."""
    return [parse_sort(token) for token in sort_strings(sort_input)]


def generic_sorts_validate(
    allowed_sorts: Mapping[str, Any],
) -> Callable[[Iterable[Sort]], tuple[Iterable[Sort], Iterable[Sort]]]:
    """Create a validate function based on the allowed sorts mapping.

    Args:
        allowed_sorts: The allowed sort descriptors by name. An empty mapping accepts every field.

    Returns function that takes sort items and returns the invalid and valid Sort items.
    """

    def validate_sort_items(sort_by: Iterable[Sort]) -> tuple[Iterable[Sort], Iterable[Sort]]:
        def _is_valid_sort(item: Sort) -> bool:
            return not allowed_sorts or item.field in allowed_sorts

        return partition(_is_valid_sort, sort_by)

    return validate_sort_items
