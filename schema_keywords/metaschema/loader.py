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

"""Loader for YAML metaschema definition files.

A definition file lists keyword validators as import paths::

    metaschema_format: 0.1.0
    uri: http://example.com/my-metaschema
    base: builtin
    keywords:
      even: my_package.validators:EvenValidator
    remove: [pattern]

Import paths are not resolved here. A path which cannot be imported turns
into an invalid validator when a schema using the keyword is resolved.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from ..config import ResolverConfig, resolver_config
from ..exceptions import MetaSchemaError
from ..utils.format_version import check_format_version
from .metaschema import MetaSchema

logger = logging.getLogger(__name__)

_DEFINITION_SCHEMA_PATH = Path(__file__).parent / "schema" / "definition.json"

# Metaschema cache keyed by resolved definition file path
_METASCHEMA_CACHE: Dict[Path, MetaSchema] = {}
_DEFINITION_SCHEMA: Optional[dict] = None


def get_definition_schema() -> dict:
    """Return the JSON Schema describing definition files (loaded once)."""
    global _DEFINITION_SCHEMA
    if _DEFINITION_SCHEMA is None:
        with open(_DEFINITION_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _DEFINITION_SCHEMA = json.load(f)
    return _DEFINITION_SCHEMA


def validate_definition(data: Any, source: str = "<definition>") -> None:
    """Check a parsed definition against the definition JSON Schema.

    Raises:
        MetaSchemaError: On the first schema violation, with its location.
    """
    try:
        jsonschema.validate(instance=data, schema=get_definition_schema())
    except JsonSchemaValidationError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
        raise MetaSchemaError(f"Invalid metaschema definition {source} at {path}: {e.message}") from e


def metaschema_from_definition(data: Any, source: str = "<definition>") -> MetaSchema:
    """Build a metaschema from a parsed definition mapping."""
    validate_definition(data, source)

    version = check_format_version(data["metaschema_format"])
    if version.minor_newer:
        logger.warning(f"{source}: {version.message}")

    if data.get("base") == "builtin":
        base = MetaSchema.builtin()
    else:
        base = MetaSchema(data["uri"], {})

    return base.with_validators(
        data["uri"],
        validators=data.get("keywords"),
        remove=data.get("remove", ()),
        description=data.get("description", ""),
    )


def load_metaschema(file_path: Union[str, Path], config: Optional[ResolverConfig] = None) -> MetaSchema:
    """Load a metaschema definition file.

    Args:
        file_path: Path to the YAML definition
        config: Configuration; the global configuration when None

    Returns:
        The metaschema defined by the file

    Raises:
        MetaSchemaError: If the file is missing, is not valid YAML or does
            not follow the definition format
    """
    config = config or resolver_config
    path = Path(file_path).resolve()

    if config.cache_enabled and path in _METASCHEMA_CACHE:
        logger.debug(f"Loading metaschema from cache: {path}")
        return _METASCHEMA_CACHE[path]

    if not path.is_file():
        raise MetaSchemaError(f"Metaschema definition file not found: {path}")

    logger.debug(f"Loading metaschema definition: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MetaSchemaError(f"Invalid YAML in metaschema definition {path}: {e}") from e

    metaschema = metaschema_from_definition(data, source=str(path))

    if config.cache_enabled:
        _METASCHEMA_CACHE[path] = metaschema
    return metaschema


def default_metaschema(config: Optional[ResolverConfig] = None) -> MetaSchema:
    """The configured metaschema, or the builtin one when none is configured."""
    config = config or resolver_config
    if config.metaschema_file:
        return load_metaschema(config.metaschema_file, config)
    return MetaSchema.builtin()


def clear_cache() -> None:
    """Clear the metaschema cache. Useful for testing."""
    _METASCHEMA_CACHE.clear()
