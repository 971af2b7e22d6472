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
from http import HTTPStatus


class InvalidSortQueryError(ValueError):
    """Raised when a request asks to sort on keys that are not in the allow-list.

    Examples:
        >>> print(InvalidSortQueryError(["email", "age"], ["name"]))
        Requested sort(s) 'email, age' are not allowed. Allowed sort(s) are: name
    """

    status_code = HTTPStatus.BAD_REQUEST
    title = "Invalid sort query"

    def __init__(self, unknown_sorts: list[str], allowed_sorts: list[str]) -> None:
        self.unknown_sorts = list(unknown_sorts)
        self.allowed_sorts = list(allowed_sorts)
        self.message = (
            f"Requested sort(s) '{', '.join(self.unknown_sorts)}' are not allowed. "
            f"Allowed sort(s) are: {', '.join(self.allowed_sorts)}"
        )
        super().__init__(self.message)
