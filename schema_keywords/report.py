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

"""Diagnostics produced while validating an instance."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Domain(str, Enum):
    """Processing stage a message originates from."""

    SYNTAX = "syntax"
    REF_RESOLVING = "ref_resolving"
    VALIDATION = "validation"

    def new_message(
        self,
        message: str,
        keyword: Optional[str] = None,
        instance_path: str = "",
        fatal: bool = False,
        **info: Any,
    ) -> "Message":
        """Create a message belonging to this domain."""
        return Message(
            domain=self,
            message=message,
            keyword=keyword,
            instance_path=instance_path,
            info=dict(info),
            fatal=fatal,
        )


@dataclass(frozen=True)
class Message:
    domain: Domain
    message: str
    keyword: Optional[str] = None
    instance_path: str = ""
    info: Dict[str, Any] = field(default_factory=dict)
    fatal: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert message to dictionary format."""
        result: Dict[str, Any] = {
            'domain': self.domain.value,
            'message': self.message,
        }
        if self.keyword is not None:
            result['keyword'] = self.keyword
        result['instance_path'] = self.instance_path
        result.update(self.info)
        if self.fatal:
            result['fatal'] = True
        return result

    def __str__(self) -> str:
        prefix = f"{self.domain.value}"
        if self.keyword:
            prefix += f"/{self.keyword}"
        location = self.instance_path or "/"
        return f"{prefix}: {location} - {self.message}"


class ValidationReport:
    """Container for the messages of one validation pass.

    A fatal message supersedes everything: when one is added, previously
    collected messages are dropped and later ones are ignored.
    """

    def __init__(self):
        self._messages: List[Message] = []
        self._fatal = False

    def add_message(self, message: Message) -> None:
        if self._fatal:
            return
        if message.fatal:
            self._fatal = True
            self._messages.clear()
        self._messages.append(message)

    @property
    def messages(self) -> List[Message]:
        return list(self._messages)

    def is_success(self) -> bool:
        return not self._messages

    def is_fatal(self) -> bool:
        return self._fatal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.is_success(),
            'fatal': self._fatal,
            'messages': [m.to_dict() for m in self._messages],
        }

    def __len__(self) -> int:
        return len(self._messages)
