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
from typing import Any

from starlette.requests import Request


def query_builder_params(request: Request) -> dict[str, Any]:
    """FastAPI dependency returning the query parameters of the request.

    Repeated parameters become a list, so `?sort=name&sort=-age` gives `{"sort": ["name", "-age"]}`
    and `?sort=name,-age` gives `{"sort": "name,-age"}`.
    """
    params: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        params[key] = values if len(values) > 1 else values[0]
    return params
