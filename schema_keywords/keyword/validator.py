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

"""Base class for keyword validators and the construction-failure sentinel."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, FrozenSet

from ..context import ValidationContext
from ..report import Domain, Message, ValidationReport
from ..utils.node_type import NodeType, get_node_type


class KeywordValidator(ABC):
    """A unit of validation logic bound to one keyword of one schema node.

    Subclasses are built from the value of their keyword in the schema and
    declare which instance node types they apply to; instances of any
    other type are skipped without calling :meth:`validate`.
    """

    def __init__(self, keyword: str, *node_types: NodeType):
        self.keyword = keyword
        self.node_types: FrozenSet[NodeType] = frozenset(node_types) or NodeType.all_types()

    def validate_instance(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        """Validate an instance if its node type is handled by this validator."""
        if get_node_type(instance) in self.node_types:
            self.validate(context, report, instance)

    @abstractmethod
    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        """Check the instance and add messages to the report."""
        pass

    def always_true(self) -> bool:
        """Whether this validator can never fail, given its schema value."""
        return False

    def new_message(self, context: ValidationContext, message: str, fatal: bool = False, **info: Any) -> Message:
        return Domain.VALIDATION.new_message(
            message,
            keyword=self.keyword,
            instance_path=context.instance_path,
            fatal=fatal,
            **info,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keyword!r})"


class ConstructionFailure(str, Enum):
    """Why a keyword validator could not be built."""

    CONSTRUCTOR_MISSING = "constructor_missing"
    INVOCATION_FAILED = "invocation_failed"


class InvalidValidator(KeywordValidator):
    """Stands in for a keyword validator whose construction failed.

    It applies to every node type, is never a no-op, and reports a single
    fatal message whatever the instance.
    """

    def __init__(
        self,
        keyword: str,
        name: str,
        error_kind: str,
        error_message: str,
        failure: ConstructionFailure = ConstructionFailure.INVOCATION_FAILED,
    ):
        super().__init__(keyword)
        self.name = name
        self.error_kind = error_kind
        self.error_message = error_message
        self.failure = failure

    def validate_instance(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        self.validate(context, report, instance)

    def validate(self, context: ValidationContext, report: ValidationReport, instance: Any) -> None:
        report.add_message(
            self.new_message(
                context,
                "cannot build validator",
                fatal=True,
                validator=self.name,
                error_kind=self.error_kind,
                error_message=self.error_message,
                failure=self.failure.value,
            )
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name
