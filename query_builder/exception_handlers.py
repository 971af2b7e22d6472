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
import structlog
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse

from query_builder.errors import InvalidSortQueryError

logger = structlog.get_logger(__name__)


async def invalid_sort_query_handler(request: Request, exc: InvalidSortQueryError) -> JSONResponse:
    logger.debug("Rejecting sort query", path=request.url.path, unknown_sorts=exc.unknown_sorts)
    body = {
        "detail": exc.message,
        "status": exc.status_code,
        "title": exc.title,
        "unknown_sorts": exc.unknown_sorts,
        "allowed_sorts": exc.allowed_sorts,
    }
    return JSONResponse(body, status_code=exc.status_code)


def add_exception_handlers(app: Starlette) -> None:
    app.add_exception_handler(InvalidSortQueryError, invalid_sort_query_handler)  # type: ignore[arg-type]
