"""Tests for validator resolution."""

import logging
import random

import pytest

from conftest import EnumExplodes, RecordingValidator, ctor_ok, ctor_throws
from schema_keywords.keyword import (
    InvalidValidator,
    ValidatorFactory,
    ValidatorRegistry,
    resolve_validators,
)
from schema_keywords.metaschema import MetaSchema


class TestResolveValidators:

    def test_single_known_keyword(self):
        registry = ValidatorRegistry({"type": ctor_ok("type")})
        validators = resolve_validators(registry, {"type": "string"})

        assert len(validators) == 1
        validator = next(iter(validators))
        assert validator.keyword == "type"
        assert validator.fragment == "string"
        assert not validator.always_true()

    def test_no_op_validator_is_dropped(self):
        registry = ValidatorRegistry({"required": ctor_ok("required")})
        assert resolve_validators(registry, {"required": []}) == frozenset()

    def test_failing_constructor_gives_invalid_validator(self):
        registry = ValidatorRegistry({"enum": ctor_throws})
        validators = resolve_validators(registry, {"enum": [1, 2, 3]})

        assert len(validators) == 1
        validator = next(iter(validators))
        assert isinstance(validator, InvalidValidator)
        assert validator.keyword == "enum"
        assert validator.error_kind == f"{EnumExplodes.__module__}.EnumExplodes"
        assert validator.error_message == "cannot handle [1, 2, 3]"

    def test_unknown_keywords_are_ignored(self):
        registry = ValidatorRegistry({"type": ctor_ok("type")})
        assert resolve_validators(registry, {"title": "x"}) == frozenset()

    @pytest.mark.parametrize("schema", [[{"type": "string"}], "type", 42, None, True])
    def test_non_object_schema_resolves_to_nothing(self, schema):
        calls = []

        def build(fragment):
            calls.append(fragment)
            return RecordingValidator("type", fragment)

        registry = ValidatorRegistry({"type": build})
        assert resolve_validators(registry, schema) == frozenset()
        assert calls == []

    def test_one_validator_per_keyword(self):
        registry = ValidatorRegistry({
            "type": ctor_ok("type"),
            "required": ctor_ok("required"),
            "enum": ctor_throws,
            "minimum": ctor_ok("minimum"),
        })
        schema = {
            "type": "object",
            "required": ["a"],
            "enum": [{}],
            "minimum": [],  # no-op
            "description": "ignored",
        }

        validators = resolve_validators(registry, schema)
        keywords = [v.keyword for v in validators]

        assert sorted(keywords) == ["enum", "required", "type"]
        assert not any(v.always_true() for v in validators)

    def test_resolution_is_idempotent_but_builds_fresh_instances(self):
        registry = ValidatorRegistry({"type": ctor_ok("type"), "required": ctor_ok("required")})
        schema = {"type": "string", "required": []}

        first = resolve_validators(registry, schema)
        second = resolve_validators(registry, schema)

        assert {v.keyword for v in first} == {v.keyword for v in second} == {"type"}
        assert first.isdisjoint(second)

    def test_result_is_immutable(self, ok_registry):
        validators = resolve_validators(ok_registry, {"type": "string"})
        assert isinstance(validators, frozenset)

    def test_registry_is_not_mutated(self, ok_registry):
        before = dict(ok_registry)
        resolve_validators(ok_registry, {"type": "string", "other": 1})
        assert dict(ok_registry) == before

    def test_no_op_is_logged_at_debug(self, caplog):
        registry = ValidatorRegistry({"required": ctor_ok("required")})
        with caplog.at_level(logging.DEBUG, logger="schema_keywords.keyword.factory"):
            resolve_validators(registry, {"required": []})
        assert "Skipping no-op validator for keyword 'required'" in caplog.text


_FRAGMENTS = ["x", "", [], [1], {}, {"a": 1}, 0, None]


def _random_case(rng):
    registry = {}
    for index in range(rng.randint(0, 8)):
        keyword = f"k{index}"
        registry[keyword] = ctor_throws if rng.random() < 0.3 else ctor_ok(keyword)
    schema = {}
    for keyword in list(registry) + [f"unknown{i}" for i in range(4)]:
        if rng.random() < 0.6:
            schema[keyword] = rng.choice(_FRAGMENTS)
    return registry, schema


class TestResolutionOverGeneratedSchemas:

    @pytest.mark.parametrize("seed", range(50))
    def test_resolution_invariants(self, seed):
        registry, schema = _random_case(random.Random(seed))
        validators = resolve_validators(ValidatorRegistry(registry), schema)

        keywords = [v.keyword for v in validators]
        failing = {k for k in schema if registry.get(k) is ctor_throws}
        built = {k for k in schema if k in registry and k not in failing and schema[k] not in ([], {}, "")}

        assert len(keywords) == len(set(keywords))
        assert set(keywords) <= set(schema) & set(registry)
        assert set(keywords) == failing | built
        assert not any(v.always_true() for v in validators)
        assert {v.keyword for v in validators if isinstance(v, InvalidValidator)} == failing

        again = resolve_validators(ValidatorRegistry(registry), schema)
        assert {v.keyword for v in again} == set(keywords)


class TestValidatorFactory:

    def test_get_validators_uses_registry(self, ok_registry):
        factory = ValidatorFactory(ok_registry)
        validators = factory.get_validators({"type": "integer", "required": ["x"]})
        assert {v.keyword for v in validators} == {"type", "required"}

    def test_from_metaschema(self):
        metaschema = MetaSchema("urn:test", {"type": ctor_ok("type")})
        factory = ValidatorFactory.from_metaschema(metaschema)

        assert factory.registry.known_keywords() == frozenset({"type"})
        assert len(factory.get_validators({"type": "null"})) == 1

    def test_builtin_metaschema(self):
        factory = ValidatorFactory.from_metaschema(MetaSchema.builtin())
        schema = {
            "type": "string",
            "minLength": 0,
            "maxLength": 3,
            "required": [],
            "uniqueItems": False,
            "enum": "not an array",
        }

        validators = factory.get_validators(schema)
        by_keyword = {v.keyword: v for v in validators}

        assert set(by_keyword) == {"type", "maxLength", "enum"}
        assert isinstance(by_keyword["enum"], InvalidValidator)
        assert by_keyword["enum"].error_kind == "TypeError"
