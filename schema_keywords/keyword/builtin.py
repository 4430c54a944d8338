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

"""Keyword validators registered by the builtin metaschema.

Each validator is built from the value of its keyword only. Values are
expected to have passed syntax validation; a value of the wrong shape makes
the constructor raise, which the factory reports as a construction failure.
"""

import re
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Type

from ..context import ValidationContext
from ..report import ValidationReport
from ..utils.node_type import NodeType, get_node_type
from .validator import KeywordValidator

_NUMERIC = (NodeType.INTEGER, NodeType.NUMBER)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(keyword: str, value: Any) -> Any:
    if not _is_number(value):
        raise TypeError(f"'{keyword}' must be a number, got {type(value).__name__}")
    return value


def _require_count(keyword: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"'{keyword}' must be a non-negative integer, got {value!r}")
    return value


def json_equals(first: Any, second: Any) -> bool:
    """JSON value equality: booleans never equal numbers, 1 equals 1.0."""
    if _is_number(first) and _is_number(second):
        return first == second
    if isinstance(first, bool) or isinstance(second, bool):
        return type(first) is type(second) and first == second
    if isinstance(first, Mapping) and isinstance(second, Mapping):
        if first.keys() != second.keys():
            return False
        return all(json_equals(first[k], second[k]) for k in first)
    if isinstance(first, (list, tuple)) and isinstance(second, (list, tuple)):
        return len(first) == len(second) and all(json_equals(a, b) for a, b in zip(first, second))
    if get_node_type(first) != get_node_type(second):
        return False
    return first == second


class TypeValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("type")
        names = [fragment] if isinstance(fragment, str) else list(fragment)
        self.allowed = frozenset(NodeType.from_name(name) for name in names)
        # integers are numbers too
        self._accepted = set(self.allowed)
        if NodeType.NUMBER in self.allowed:
            self._accepted.add(NodeType.INTEGER)

    def always_true(self) -> bool:
        return self._accepted == NodeType.all_types()

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        found = get_node_type(instance)
        if found not in self._accepted:
            report.add_message(
                self.new_message(
                    context,
                    "instance does not match any allowed primitive type",
                    found=found.value,
                    expected=sorted(t.value for t in self.allowed),
                )
            )


class EnumValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("enum")
        if not isinstance(fragment, list):
            raise TypeError(f"'enum' must be an array, got {type(fragment).__name__}")
        self.values: List[Any] = list(fragment)

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        if not any(json_equals(instance, value) for value in self.values):
            report.add_message(
                self.new_message(context, "instance does not match any enum value", enum=self.values)
            )


class ConstValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("const")
        self.value = fragment

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        if not json_equals(instance, self.value):
            report.add_message(
                self.new_message(context, "instance does not match const value", const=self.value)
            )


class RequiredValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("required", NodeType.OBJECT)
        if not isinstance(fragment, list) or not all(isinstance(f, str) for f in fragment):
            raise TypeError("'required' must be an array of strings")
        self.required = frozenset(fragment)

    def always_true(self) -> bool:
        return not self.required

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        missing = sorted(self.required.difference(instance.keys()))
        if missing:
            report.add_message(
                self.new_message(
                    context,
                    "required property(ies) not found",
                    required=sorted(self.required),
                    missing=missing,
                )
            )


class _NumericBoundValidator(KeywordValidator):
    """Compares numeric instances against a bound; subclasses set the check."""

    message = ""

    def __init__(self, keyword: str, fragment: Any):
        super().__init__(keyword, *_NUMERIC)
        self.bound = _require_number(keyword, fragment)

    def violates(self, value: Any) -> bool:
        raise NotImplementedError

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        if self.violates(instance):
            report.add_message(
                self.new_message(context, self.message, **{self.keyword: self.bound, 'found': instance})
            )


class MinimumValidator(_NumericBoundValidator):
    message = "number is lower than the required minimum"

    def __init__(self, fragment: Any):
        super().__init__("minimum", fragment)

    def violates(self, value: Any) -> bool:
        return value < self.bound


class MaximumValidator(_NumericBoundValidator):
    message = "number is greater than the required maximum"

    def __init__(self, fragment: Any):
        super().__init__("maximum", fragment)

    def violates(self, value: Any) -> bool:
        return value > self.bound


class ExclusiveMinimumValidator(_NumericBoundValidator):
    message = "number is not strictly greater than the required minimum"

    def __init__(self, fragment: Any):
        super().__init__("exclusiveMinimum", fragment)

    def violates(self, value: Any) -> bool:
        return value <= self.bound


class ExclusiveMaximumValidator(_NumericBoundValidator):
    message = "number is not strictly lower than the required maximum"

    def __init__(self, fragment: Any):
        super().__init__("exclusiveMaximum", fragment)

    def violates(self, value: Any) -> bool:
        return value >= self.bound


class MultipleOfValidator(_NumericBoundValidator):
    message = "number is not a multiple of the declared divisor"

    def __init__(self, fragment: Any):
        super().__init__("multipleOf", fragment)
        if self.bound <= 0:
            raise ValueError(f"'multipleOf' must be strictly positive, got {self.bound!r}")
        # exact rational arithmetic so that 0.3 is a multiple of 0.1
        self._divisor = Fraction(str(self.bound))

    def violates(self, value: Any) -> bool:
        return Fraction(str(value)) % self._divisor != 0


class _CountValidator(KeywordValidator):
    """Bounds the size of strings, arrays or objects."""

    message = ""
    lower = True

    def __init__(self, keyword: str, node_type: NodeType, fragment: Any):
        super().__init__(keyword, node_type)
        self.limit = _require_count(keyword, fragment)

    def always_true(self) -> bool:
        return self.lower and self.limit == 0

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        size = len(instance)
        if (size < self.limit) if self.lower else (size > self.limit):
            report.add_message(
                self.new_message(context, self.message, **{self.keyword: self.limit, 'found': size})
            )


class MinLengthValidator(_CountValidator):
    message = "string is too short"

    def __init__(self, fragment: Any):
        super().__init__("minLength", NodeType.STRING, fragment)


class MaxLengthValidator(_CountValidator):
    message = "string is too long"
    lower = False

    def __init__(self, fragment: Any):
        super().__init__("maxLength", NodeType.STRING, fragment)


class MinItemsValidator(_CountValidator):
    message = "array is too short"

    def __init__(self, fragment: Any):
        super().__init__("minItems", NodeType.ARRAY, fragment)


class MaxItemsValidator(_CountValidator):
    message = "array is too long"
    lower = False

    def __init__(self, fragment: Any):
        super().__init__("maxItems", NodeType.ARRAY, fragment)


class MinPropertiesValidator(_CountValidator):
    message = "object has too few members"

    def __init__(self, fragment: Any):
        super().__init__("minProperties", NodeType.OBJECT, fragment)


class MaxPropertiesValidator(_CountValidator):
    message = "object has too many members"
    lower = False

    def __init__(self, fragment: Any):
        super().__init__("maxProperties", NodeType.OBJECT, fragment)


class PatternValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("pattern", NodeType.STRING)
        if not isinstance(fragment, str):
            raise TypeError(f"'pattern' must be a string, got {type(fragment).__name__}")
        # re.error for an invalid regex surfaces as a construction failure
        self.regex = re.compile(fragment)

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        # regexes are not anchored
        if self.regex.search(instance) is None:
            report.add_message(
                self.new_message(context, "string does not match regex", regex=self.regex.pattern, string=instance)
            )


class UniqueItemsValidator(KeywordValidator):
    def __init__(self, fragment: Any):
        super().__init__("uniqueItems", NodeType.ARRAY)
        if not isinstance(fragment, bool):
            raise TypeError(f"'uniqueItems' must be a boolean, got {type(fragment).__name__}")
        self.unique = fragment

    def always_true(self) -> bool:
        return not self.unique

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        seen: List[Any] = []
        for item in instance:
            if any(json_equals(item, other) for other in seen):
                report.add_message(self.new_message(context, "elements in the array are not unique"))
                return
            seen.append(item)


BUILTIN_VALIDATORS: Dict[str, Type[KeywordValidator]] = {
    "type": TypeValidator,
    "enum": EnumValidator,
    "const": ConstValidator,
    "required": RequiredValidator,
    "minimum": MinimumValidator,
    "maximum": MaximumValidator,
    "exclusiveMinimum": ExclusiveMinimumValidator,
    "exclusiveMaximum": ExclusiveMaximumValidator,
    "multipleOf": MultipleOfValidator,
    "minLength": MinLengthValidator,
    "maxLength": MaxLengthValidator,
    "pattern": PatternValidator,
    "minItems": MinItemsValidator,
    "maxItems": MaxItemsValidator,
    "uniqueItems": UniqueItemsValidator,
    "minProperties": MinPropertiesValidator,
    "maxProperties": MaxPropertiesValidator,
}
