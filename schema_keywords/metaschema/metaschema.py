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

from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..keyword.builtin import BUILTIN_VALIDATORS

BUILTIN_URI = "schema_keywords:builtin"


class MetaSchema:
    """Defines which keywords exist and how their validators are built.

    Validator entries are callables taking the keyword's schema value, or
    ``"package.module:Attribute"`` import paths.
    """

    def __init__(self, uri: str, validators: Mapping[str, Any], description: str = ""):
        self.uri = uri
        self.description = description
        self._validators = MappingProxyType(dict(validators))

    @classmethod
    def builtin(cls) -> "MetaSchema":
        return cls(BUILTIN_URI, BUILTIN_VALIDATORS, description="Builtin keyword validators")

    def get_validators(self) -> Mapping[str, Any]:
        """Immutable snapshot of keyword name to validator constructor."""
        return self._validators

    def with_validators(
        self,
        uri: str,
        validators: Optional[Mapping[str, Any]] = None,
        remove=(),
        description: str = "",
    ) -> "MetaSchema":
        """Derive a metaschema adding/replacing validators then dropping keywords."""
        merged = dict(self._validators)
        merged.update(validators or {})
        for keyword in remove:
            merged.pop(keyword, None)
        return MetaSchema(uri, merged, description=description)

    def __repr__(self) -> str:
        return f"MetaSchema({self.uri!r}, keywords={sorted(self._validators)})"
