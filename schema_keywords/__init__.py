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

"""Keyword validator resolution and instantiation engine."""

__version__ = "0.1.0"

# Format version of metaschema definition files understood by this package.
METASCHEMA_FORMAT_VERSION = "0.1.0"

from .keyword import (  # noqa: E402
    InvalidValidator,
    KeywordValidator,
    ValidatorConstructor,
    ValidatorFactory,
    ValidatorRegistry,
    build_validator,
    resolve_validators,
)
from .metaschema import MetaSchema, default_metaschema, load_metaschema  # noqa: E402
from .report import Domain, Message, ValidationReport  # noqa: E402
from .validator import SchemaValidator  # noqa: E402

__all__ = [
    "InvalidValidator",
    "KeywordValidator",
    "ValidatorConstructor",
    "ValidatorFactory",
    "ValidatorRegistry",
    "build_validator",
    "resolve_validators",
    "MetaSchema",
    "default_metaschema",
    "load_metaschema",
    "Domain",
    "Message",
    "ValidationReport",
    "SchemaValidator",
]
