"""Shared test fixtures for the schema keyword engine."""

from typing import Any

import pytest

from schema_keywords.context import ValidationContext
from schema_keywords.keyword import KeywordValidator, ValidatorFactory, ValidatorRegistry
from schema_keywords.metaschema import clear_cache
from schema_keywords.report import ValidationReport


class RecordingValidator(KeywordValidator):
    """Validator remembering its schema value; a no-op when the value is empty."""

    def __init__(self, keyword: str, fragment: Any):
        super().__init__(keyword)
        self.fragment = fragment
        self.seen = []

    def always_true(self) -> bool:
        return self.fragment in ([], {}, "")

    def validate(self, context, report, instance):
        self.seen.append(instance)


class EnumExplodes(Exception):
    pass


def ctor_ok(keyword: str):
    def build(fragment):
        return RecordingValidator(keyword, fragment)

    return build


def ctor_throws(fragment):
    raise EnumExplodes(f"cannot handle {fragment!r}")


@pytest.fixture
def ok_registry() -> ValidatorRegistry:
    return ValidatorRegistry({
        "type": ctor_ok("type"),
        "required": ctor_ok("required"),
    })


@pytest.fixture
def report() -> ValidationReport:
    return ValidationReport()


@pytest.fixture
def context(ok_registry) -> ValidationContext:
    return ValidationContext(ValidatorFactory(ok_registry))


@pytest.fixture(autouse=True)
def _clear_metaschema_cache():
    clear_cache()
    yield
    clear_cache()
