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

"""Custom exceptions for the schema keyword engine."""


class SchemaKeywordsError(Exception):
    """Base exception for schema keyword related errors."""
    pass


class KeywordRegistryError(SchemaKeywordsError):
    """Exception raised when a validator registry cannot be built."""
    pass


class MetaSchemaError(SchemaKeywordsError):
    """Exception raised for unreadable or invalid metaschema definitions."""
    pass


class FormatVersionError(MetaSchemaError):
    """Exception raised when a definition file's format version is incompatible."""
    pass


class ValidatorConstructionError(SchemaKeywordsError):
    """Base class for failures while building a keyword validator.

    These are never raised out of the factory; they are captured and
    reported through an InvalidValidator.
    """
    pass


class ConstructorMissingError(ValidatorConstructionError):
    """Exception captured when a constructor capability has no usable entry point."""
    pass
