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

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, FrozenSet

if TYPE_CHECKING:
    from .keyword.factory import ValidatorFactory
    from .keyword.validator import KeywordValidator


@dataclass(frozen=True)
class ValidationContext:
    """State shared by the keyword validators of one evaluation step."""

    factory: "ValidatorFactory"
    # JSON pointer of the instance being validated
    instance_path: str = ""

    def validators_for(self, schema: Any) -> FrozenSet["KeywordValidator"]:
        return self.factory.get_validators(schema)
