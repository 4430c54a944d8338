# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import sys
from typing import Optional

DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, limit: int) -> None:
        super().__init__()
        self._limit = limit

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._limit


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Attach a stdout/stderr handler pair to a logger.

    Records below ``stderr_level`` go to stdout, the rest to stderr. Handlers
    installed by a previous call are replaced so repeated configuration does
    not duplicate output.

    Args:
        level: Level of the configured logger
        stderr_level: Lowest level routed to stderr
        formatter: Formatter for both handlers (defaults to name/level/message)
        logger_name: Logger to configure; the root logger when None

    Returns:
        The configured logger
    """
    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
