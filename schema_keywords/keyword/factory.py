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

"""Factory providing the set of keyword validators for a schema node.

The factory is only used once a schema node is known to be valid: it is not
a JSON reference (or the reference was resolved) and it passed syntax
validation.

Failing to build a keyword validator does not abort resolution. The failure
is turned into an :class:`InvalidValidator`, which makes validation of the
instance fail with a fatal message once it is evaluated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, FrozenSet, Mapping

from ..exceptions import ConstructorMissingError
from .constructor import ValidatorConstructor, qualified_name
from .registry import ValidatorRegistry
from .validator import ConstructionFailure, InvalidValidator, KeywordValidator

if TYPE_CHECKING:
    from ..metaschema.metaschema import MetaSchema

logger = logging.getLogger(__name__)


def resolve_validators(registry: ValidatorRegistry, schema: Any) -> FrozenSet[KeywordValidator]:
    """Return the validators applying to a schema node.

    Args:
        registry: Keyword constructors known to the metaschema
        schema: The schema node; anything but a mapping yields no validators

    Returns:
        One validator per keyword present in both the schema and the
        registry, minus those which can never fail
    """
    if not isinstance(schema, Mapping):
        logger.debug(f"Schema node is not an object ({type(schema).__name__}), no keyword applies")
        return frozenset()

    keywords = registry.known_keywords().intersection(schema.keys())

    built = (build_validator(registry.lookup(keyword), schema[keyword]) for keyword in keywords)
    validators = set()
    for validator in built:
        if validator.always_true():
            logger.debug(f"Skipping no-op validator for keyword '{validator.keyword}'")
            continue
        validators.add(validator)

    return frozenset(validators)


def build_validator(constructor: ValidatorConstructor, fragment: Any) -> KeywordValidator:
    """Build one keyword validator from its schema value.

    This never raises: if the constructor cannot be resolved, raises while
    building, or returns something which is not a keyword validator, an
    :class:`InvalidValidator` carrying the error is returned instead.

    Args:
        constructor: The constructor capability of the keyword
        fragment: Value of the keyword in the schema

    Returns:
        The built validator, or an InvalidValidator
    """
    try:
        build = constructor.resolve()
    except Exception as e:
        return invalid_validator(constructor, e, ConstructionFailure.CONSTRUCTOR_MISSING)

    try:
        validator = build(fragment)
    except Exception as e:
        return invalid_validator(constructor, e, ConstructionFailure.INVOCATION_FAILED)

    if not isinstance(validator, KeywordValidator):
        error = ConstructorMissingError(
            f"Constructor for keyword '{constructor.keyword}' returned "
            f"{type(validator).__name__} instead of a KeywordValidator"
        )
        return invalid_validator(constructor, error, ConstructionFailure.CONSTRUCTOR_MISSING)

    return validator


def invalid_validator(
    constructor: ValidatorConstructor, error: Exception, failure: ConstructionFailure
) -> InvalidValidator:
    """Build the validator standing in for a failed construction."""
    error_kind = qualified_name(type(error))
    logger.warning(
        f"Cannot build validator {constructor.name} for keyword '{constructor.keyword}': "
        f"{error_kind}: {error}"
    )
    return InvalidValidator(
        keyword=constructor.keyword,
        name=constructor.name,
        error_kind=error_kind,
        error_message=str(error),
        failure=failure,
    )


class ValidatorFactory:
    """Provides keyword validators for the schema nodes of one metaschema."""

    def __init__(self, registry: ValidatorRegistry):
        self.registry = registry

    @classmethod
    def from_metaschema(cls, metaschema: "MetaSchema") -> "ValidatorFactory":
        return cls(ValidatorRegistry.from_metaschema(metaschema))

    def get_validators(self, schema: Any) -> FrozenSet[KeywordValidator]:
        return resolve_validators(self.registry, schema)
