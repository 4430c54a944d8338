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

"""Constructor capabilities stored in a validator registry."""

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Union

from ..exceptions import ConstructorMissingError
from .validator import KeywordValidator

ValidatorTarget = Union[Callable[[Any], KeywordValidator], str]


def qualified_name(obj: Any) -> str:
    """Return ``module.QualName`` for a class or function (bare name for builtins)."""
    module = getattr(obj, "__module__", None)
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if name is None:
        name = type(obj).__qualname__
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


@dataclass(frozen=True)
class ValidatorConstructor:
    """Builds the validator of one keyword from that keyword's schema value.

    ``target`` is either a callable taking the schema fragment, or an import
    path ``"package.module:attribute"`` resolved when the validator is first
    built. :meth:`resolve` raises :class:`ConstructorMissingError` for a
    malformed path or a non-callable target, and lets the ``ImportError`` or
    ``AttributeError`` of an unresolvable path through unchanged.
    """

    keyword: str
    target: ValidatorTarget

    @property
    def name(self) -> str:
        """Identity of the implementing type, used in diagnostics."""
        if isinstance(self.target, str):
            return self.target.replace(":", ".")
        return qualified_name(self.target)

    def resolve(self) -> Callable[[Any], KeywordValidator]:
        target = self.target
        if isinstance(target, str):
            target = _import_target(target)
        if not callable(target):
            raise ConstructorMissingError(
                f"Constructor for keyword '{self.keyword}' is not callable: {target!r}"
            )
        return target

    def __call__(self, fragment: Any) -> KeywordValidator:
        return self.resolve()(fragment)


def _import_target(path: str) -> Any:
    module_name, sep, attr_path = path.partition(":")
    if not sep:
        # also accept plain dotted form "package.module.Attribute"
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise ConstructorMissingError(
            f"Invalid constructor path '{path}'. Expected format: 'package.module:Attribute'"
        )

    # ImportError and AttributeError propagate as they are
    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj
