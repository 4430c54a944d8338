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

"""JSON node types of parsed documents."""

from enum import Enum
from typing import Any, FrozenSet, Mapping


class NodeType(str, Enum):
    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"

    @classmethod
    def all_types(cls) -> FrozenSet["NodeType"]:
        return frozenset(cls)

    @classmethod
    def from_name(cls, name: str) -> "NodeType":
        """Look up a node type by its schema name (e.g. ``"string"``)."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown node type name: {name!r}") from None

    def __str__(self) -> str:
        return self.value


def get_node_type(value: Any) -> NodeType:
    """Return the JSON node type of a parsed value.

    ``bool`` is checked before ``int`` since it is a subclass of it. Floats
    are always ``number``, even when integral, matching how JSON parsers
    keep ``1.0`` apart from ``1``.

    Raises:
        TypeError: If the value is not something a JSON/YAML parser produces.
    """
    if value is None:
        return NodeType.NULL
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, int):
        return NodeType.INTEGER
    if isinstance(value, float):
        return NodeType.NUMBER
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, Mapping):
        return NodeType.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeType.ARRAY
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
