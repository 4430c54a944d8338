"""Tests for building a single keyword validator."""

import logging

import pytest

from conftest import RecordingValidator, ctor_ok, ctor_throws
from schema_keywords.context import ValidationContext
from schema_keywords.keyword import (
    ConstructionFailure,
    InvalidValidator,
    ValidatorConstructor,
    ValidatorFactory,
    ValidatorRegistry,
    build_validator,
)
from schema_keywords.report import ValidationReport


def _evaluate(validator, instance):
    report = ValidationReport()
    context = ValidationContext(ValidatorFactory(ValidatorRegistry({})))
    validator.validate_instance(context, report, instance)
    return report


class TestBuildValidator:

    def test_success_returns_built_validator(self):
        validator = build_validator(ValidatorConstructor("type", ctor_ok("type")), "string")
        assert isinstance(validator, RecordingValidator)
        assert validator.fragment == "string"

    def test_invocation_failure_is_captured(self):
        validator = build_validator(ValidatorConstructor("enum", ctor_throws), [1, 2, 3])

        assert isinstance(validator, InvalidValidator)
        assert validator.failure is ConstructionFailure.INVOCATION_FAILED
        assert validator.error_kind == "conftest.EnumExplodes"
        assert validator.error_message == "cannot handle [1, 2, 3]"
        assert validator.name == "conftest.ctor_throws"
        assert not validator.always_true()

    @pytest.mark.parametrize("error", [ValueError("bad value"), KeyError("key"), RecursionError("deep")])
    def test_any_exception_is_captured(self, error):
        def build(fragment):
            raise error

        validator = build_validator(ValidatorConstructor("k", build), None)
        assert isinstance(validator, InvalidValidator)
        assert validator.error_kind == type(error).__name__
        assert validator.error_message == str(error)

    def test_non_callable_constructor(self):
        validator = build_validator(ValidatorConstructor("type", 42), "string")

        assert isinstance(validator, InvalidValidator)
        assert validator.failure is ConstructionFailure.CONSTRUCTOR_MISSING
        assert validator.error_kind == "schema_keywords.exceptions.ConstructorMissingError"
        assert "not callable" in validator.error_message

    def test_unimportable_constructor_path(self):
        validator = build_validator(ValidatorConstructor("even", "no_such_package.validators:Even"), 2)

        assert isinstance(validator, InvalidValidator)
        assert validator.failure is ConstructionFailure.CONSTRUCTOR_MISSING
        assert validator.name == "no_such_package.validators.Even"
        assert validator.error_kind == "ModuleNotFoundError"
        assert validator.error_message == "No module named 'no_such_package'"

    def test_missing_attribute_in_constructor_path(self):
        validator = build_validator(
            ValidatorConstructor("type", "schema_keywords.keyword.builtin:NoSuchValidator"), "string"
        )
        assert isinstance(validator, InvalidValidator)
        assert validator.failure is ConstructionFailure.CONSTRUCTOR_MISSING
        assert validator.error_kind == "AttributeError"
        assert "NoSuchValidator" in validator.error_message

    def test_importable_constructor_path(self):
        validator = build_validator(
            ValidatorConstructor("type", "schema_keywords.keyword.builtin:TypeValidator"), "string"
        )
        assert not isinstance(validator, InvalidValidator)
        assert validator.keyword == "type"

    def test_dotted_constructor_path(self):
        validator = build_validator(
            ValidatorConstructor("minimum", "schema_keywords.keyword.builtin.MinimumValidator"), 3
        )
        assert validator.keyword == "minimum"

    def test_constructor_returning_wrong_type(self):
        validator = build_validator(ValidatorConstructor("type", lambda fragment: "nope"), "string")

        assert isinstance(validator, InvalidValidator)
        assert validator.failure is ConstructionFailure.CONSTRUCTOR_MISSING
        assert "returned str" in validator.error_message

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schema_keywords.keyword.factory"):
            build_validator(ValidatorConstructor("enum", ctor_throws), [1])
        assert "Cannot build validator conftest.ctor_throws for keyword 'enum'" in caplog.text

    def test_keyboard_interrupt_is_not_captured(self):
        def build(fragment):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            build_validator(ValidatorConstructor("k", build), None)


class TestInvalidValidator:

    def _invalid(self):
        return build_validator(ValidatorConstructor("enum", ctor_throws), [1, 2, 3])

    @pytest.mark.parametrize("instance", [None, True, 1, 1.5, "s", [1], {"a": 1}])
    def test_emits_one_fatal_message_for_any_instance(self, instance):
        report = _evaluate(self._invalid(), instance)

        assert report.is_fatal()
        assert len(report.messages) == 1
        message = report.messages[0]
        assert message.fatal
        assert message.message == "cannot build validator"
        assert message.keyword == "enum"
        assert message.info == {
            "validator": "conftest.ctor_throws",
            "error_kind": "conftest.EnumExplodes",
            "error_message": "cannot handle [1, 2, 3]",
            "failure": "invocation_failed",
        }

    def test_applies_to_every_node_type(self):
        from schema_keywords.utils.node_type import NodeType

        assert self._invalid().node_types == NodeType.all_types()

    def test_display_is_implementing_type(self):
        validator = self._invalid()
        assert str(validator) == "conftest.ctor_throws"
        assert repr(validator) == "conftest.ctor_throws"
