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

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterator, Mapping, Optional

from ..exceptions import KeywordRegistryError
from .constructor import ValidatorConstructor

if TYPE_CHECKING:
    from ..metaschema.metaschema import MetaSchema


class ValidatorRegistry(Mapping[str, ValidatorConstructor]):
    """Read-only mapping from keyword name to validator constructor.

    Values given as plain callables or import paths are wrapped into
    :class:`ValidatorConstructor` bound to their keyword. The registry takes
    a snapshot of its input and never changes afterwards.
    """

    def __init__(self, validators: Mapping[str, Any]):
        constructors: Dict[str, ValidatorConstructor] = {}
        for keyword, target in validators.items():
            if not isinstance(keyword, str) or not keyword:
                raise KeywordRegistryError(f"Keyword must be a non-empty string, got: {keyword!r}")
            if isinstance(target, ValidatorConstructor):
                target = target.target
            constructors[keyword] = ValidatorConstructor(keyword, target)

        self._constructors = MappingProxyType(constructors)
        self._keywords = frozenset(constructors)

    @classmethod
    def from_metaschema(cls, metaschema: "MetaSchema") -> "ValidatorRegistry":
        return cls(metaschema.get_validators())

    def lookup(self, keyword: str) -> Optional[ValidatorConstructor]:
        return self._constructors.get(keyword)

    def known_keywords(self) -> FrozenSet[str]:
        return self._keywords

    def __getitem__(self, keyword: str) -> ValidatorConstructor:
        return self._constructors[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructors)

    def __len__(self) -> int:
        return len(self._constructors)

    def __repr__(self) -> str:
        return f"ValidatorRegistry({sorted(self._keywords)})"
