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

"""Configuration management for the schema keyword engine."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_LOG_FORMAT, configure_split_stream_logging


@dataclass
class ResolverConfig:
    """Configuration class for validator resolution."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True

    # path to a YAML metaschema definition; empty means the builtin metaschema
    metaschema_file: str = ""

    @classmethod
    def from_env(cls) -> 'ResolverConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_KEYWORDS_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_KEYWORDS_PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv('SCHEMA_KEYWORDS_CACHE_ENABLED', 'true').lower() == 'true',
            metaschema_file=os.getenv('SCHEMA_KEYWORDS_METASCHEMA_FILE', ''),
        )

    def set_logging(self) -> logging.Logger:
        """Setup package logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name='schema_keywords',
        )


# Global configuration instance
resolver_config = ResolverConfig.from_env()
