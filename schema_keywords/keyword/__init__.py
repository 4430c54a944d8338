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

"""Keyword validators, their registry and the factory resolving them."""

from .validator import ConstructionFailure, InvalidValidator, KeywordValidator
from .constructor import ValidatorConstructor
from .registry import ValidatorRegistry
from .factory import ValidatorFactory, build_validator, resolve_validators

__all__ = [
    'ConstructionFailure',
    'InvalidValidator',
    'KeywordValidator',
    'ValidatorConstructor',
    'ValidatorRegistry',
    'ValidatorFactory',
    'build_validator',
    'resolve_validators',
]
