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
import os

from nwastdlib.logging import initialise_logging
from structlog import get_logger

from query_builder.settings import app_settings

logger = get_logger(__name__)


def logger_config(name: str, default_level: str = "INFO") -> tuple[str, dict]:
    """Logging config entry for `name`, the level can be overruled with an env-var.

    The env-var is derived from the logger name: the level of "sqlalchemy.engine" is read from
    LOG_LEVEL_SQLALCHEMY_ENGINE and falls back to `default_level`.
    """
    name_upper = name.upper().replace(".", "_")
    env_var_name = f"LOG_LEVEL_{name_upper}"
    effective_level = os.environ.get(env_var_name, default_level).upper()

    # No handler, records propagate to the root logger which structlog formats.
    return name, {"level": effective_level, "propagate": True}


LOGGER_OVERRIDES = dict(
    [
        logger_config("query_builder", default_level=app_settings.LOG_LEVEL),
        logger_config("sqlalchemy.engine", default_level="WARNING"),
    ]
)


def configure_logging(additional_loggers: dict | None = None) -> None:
    """Route the query builder's loggers (and any extra ones) through structlog."""
    initialise_logging(additional_loggers=LOGGER_OVERRIDES | (additional_loggers or {}))
    logger.debug("Logging initialised", loggers=sorted(LOGGER_OVERRIDES))
