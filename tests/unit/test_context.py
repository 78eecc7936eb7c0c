"""Tests for Context outcomes."""
from __future__ import annotations

from typing import Any

import pytest

from result_flow.application import ContextExpectations, ContextResultFactory
from result_flow.domain import (
    ContextFailure,
    ContextOutcome,
    ContextSuccess,
    KeyNotFoundError,
    NotImplementedOutcomeError,
    Outcome,
    Success,
    UnexpectedOutcomeError,
    UnexpectedTypeError,
)
from result_flow.shared.config import Settings


def must_not_run(data: Any) -> Outcome:
    raise AssertionError("step must not run")


class Pipeline:
    """Subject chaining Context steps by method name."""

    def __init__(self, config: Settings | None = None) -> None:
        self.result = ContextResultFactory(self, config=config)

    def call_a(self) -> Outcome:
        return self.result.success("a", a=1)

    def call_b(self) -> Outcome:
        return self.result.success("b", b=2)

    def call_c(self) -> Outcome:
        return self.result.success("c", c=3)


class Divide:
    """Subject using the continuation addon."""

    def __init__(self, config: Settings) -> None:
        self.result = ContextResultFactory(self, config=config)

    def call(self, arg1: Any, arg2: Any) -> Outcome:
        return (
            self.validate_numbers(arg1, arg2)
            .and_then("validate_non_zero")
            .and_then("divide", {"extra_division": 2})
        )

    def validate_numbers(self, arg1: Any, arg2: Any) -> Outcome:
        if not isinstance(arg1, (int, float)):
            return self.result.failure("invalid_arg", message="arg1 must be numeric")
        if not isinstance(arg2, (int, float)):
            return self.result.failure("invalid_arg", message="arg2 must be numeric")
        return self.result.continue_(number1=arg1, number2=arg2)

    def validate_non_zero(self, data: dict[str, Any]) -> Outcome:
        if data["number2"] == 0:
            return self.result.failure("division_by_zero", message="arg2 must not be zero")
        return self.result.continue_()

    def divide(self, data: dict[str, Any], context: dict[str, Any]) -> Outcome:
        number = (data["number1"] / data["number2"]) / context["extra_division"]
        return self.result.success("division_completed", number=number)


class TestContextValue:
    """Tests for the mapping payload."""

    def test_value_is_a_read_only_mapping(self) -> None:
        """Test immutability of the payload."""
        source = {"a": 1}
        result = ContextSuccess("ok", source)
        source["a"] = 2
        assert result.value == {"a": 1}
        with pytest.raises(TypeError):
            result.value["a"] = 3  # type: ignore[index]

    def test_default_value(self) -> None:
        """Test that None becomes an empty mapping."""
        assert ContextSuccess("ok").value == {}

    def test_value_must_be_a_mapping(self) -> None:
        """Test rejecting non-mapping payloads."""
        with pytest.raises(TypeError, match="must be a mapping"):
            ContextSuccess("ok", [1, 2])

    def test_base_is_abstract(self) -> None:
        """Test the kindless Context base."""
        with pytest.raises(NotImplementedOutcomeError):
            ContextOutcome("ok", {})

    def test_factory_fields(self) -> None:
        """Test positional mapping merged with keyword fields."""
        result = ContextResultFactory().success("ok", {"a": 1, "b": 1}, b=2)
        assert result.value == {"a": 1, "b": 2}

    def test_factory_fields_named_like_parameters(self) -> None:
        """Test keyword fields that share a name with a factory parameter."""
        result = ContextResultFactory()
        assert result.success("ok", value=5, type_="x").value == {"value": 5, "type_": "x"}
        assert result.failure("error", {"a": 1}, value=None).value == {"a": 1, "value": None}
        assert result.continue_(value=[1]).value == {"value": [1]}

    def test_repr_and_structure(self) -> None:
        """Test repr, equality and destructuring."""
        result = ContextSuccess("ok", {"a": 1})
        assert repr(result) == "ContextSuccess(type='ok', value={'a': 1})"
        assert result == ContextSuccess("ok", {"a": 1})
        assert hash(result) == hash(ContextSuccess("ok", {"a": 1}))
        assert result.deconstruct_keys() == {"success": {"ok": {"a": 1}}}
        match result:
            case ContextSuccess("ok", {"a": value}):
                assert value == 1
            case _:
                pytest.fail("pattern did not match")


class TestMerge:
    """Tests for accumulation across steps."""

    def test_success_merges(self) -> None:
        """Test merging a step's mapping into the accumulated one."""
        result = ContextSuccess("a", {"a": 1}).and_then(lambda _: ContextSuccess("b", {"b": 2}))
        assert result.is_success("b")
        assert result.value == {"a": 1, "b": 2}

    def test_new_keys_win(self) -> None:
        """Test conflict resolution."""
        result = ContextSuccess("a", {"a": 1, "x": "old"}).and_then(
            lambda _: ContextSuccess("b", {"x": "new"})
        )
        assert result.value == {"a": 1, "x": "new"}

    def test_step_receives_accumulated_mapping(self) -> None:
        """Test the block argument."""
        seen: list[dict[str, Any]] = []

        def step(data: Any) -> Outcome:
            seen.append(dict(data))
            return ContextSuccess("c", {"c": data["a"] + data["b"]})

        result = (
            ContextSuccess("a", {"a": 1})
            .and_then(lambda _: ContextSuccess("b", {"b": 2}))
            .and_then(step)
        )
        assert seen == [{"a": 1, "b": 2}]
        assert result.value == {"a": 1, "b": 2, "c": 3}

    def test_failure_keeps_its_own_payload(self) -> None:
        """Test that failures do not merge."""
        result = ContextSuccess("a", {"a": 1}).and_then(
            lambda _: ContextFailure("error", {"message": "boom"})
        )
        assert result.is_failure("error")
        assert result.value == {"message": "boom"}
        assert result.and_then(must_not_run) is result

    def test_merged_outcome_keeps_halted(self) -> None:
        """Test that the merged copy keeps the step's halted flag."""
        result = ContextSuccess("a", {"a": 1}).and_then(
            lambda _: ContextSuccess("b", {"b": 2}, halted=True)
        )
        assert result.halted
        assert result.and_then(must_not_run) is result

    def test_steps_must_return_context_outcomes(self) -> None:
        """Test rejecting base outcomes in a Context chain."""
        with pytest.raises(UnexpectedOutcomeError, match="ContextSuccess or ContextFailure"):
            ContextSuccess("a").and_then(lambda _: Success("b"))

    def test_method_steps(self) -> None:
        """Test method chaining on a Context subject."""
        pipeline = Pipeline()
        result = pipeline.call_a().and_then("call_b").and_then("call_c")
        assert result.is_success("c")
        assert result.value == {"a": 1, "b": 2, "c": 3}
        assert result.subject is pipeline


class TestExpose:
    """Tests for and_expose."""

    def test_expose_halts_by_default(self) -> None:
        """Test projecting keys into a halted success."""
        pipeline = Pipeline()
        result = (
            pipeline.call_a()
            .and_then("call_b")
            .and_expose("a_and_b", ["a", "b"])
            .and_then("call_c")
        )
        assert result.is_success("a_and_b")
        assert result.value == {"a": 1, "b": 2}
        assert result.halted

    def test_expose_without_halting(self) -> None:
        """Test that halted=False lets the chain continue."""
        exposed = (
            ContextSuccess("a", {"a": 1})
            .and_then(lambda _: ContextSuccess("b", {"b": 2}))
            .and_expose("a_and_b", ["a", "b"], halted=False)
        )
        assert not exposed.halted

        result = exposed.and_then(lambda _: ContextSuccess("c", {"c": 3}))
        assert result.is_success("c")
        assert result.value == {"a": 1, "b": 2, "c": 3}

    def test_expose_projects_in_key_order(self) -> None:
        """Test that only the requested keys are kept."""
        result = ContextSuccess("ok", {"a": 1, "b": 2, "c": 3}).and_expose("picked", ["c", "a"])
        assert list(result.value) == ["c", "a"]

    def test_expose_keeps_subject(self) -> None:
        """Test that exposing stays within the subject."""
        pipeline = Pipeline()
        assert pipeline.call_a().and_expose("only_a", ["a"]).subject is pipeline

    def test_missing_key(self) -> None:
        """Test exposing an absent key."""
        with pytest.raises(KeyNotFoundError, match="key 'z' not found") as exc_info:
            ContextSuccess("ok", {"a": 1}).and_expose("x", ["a", "z"])
        assert isinstance(exc_info.value, KeyError)
        assert exc_info.value.key == "z"

    def test_failure_is_not_exposed(self) -> None:
        """Test and_expose on a failure."""
        failure = ContextFailure("error", {"message": "boom"})
        assert failure.and_expose("x", ["a"]) is failure

    def test_exposed_type_is_checked(self) -> None:
        """Test that the exposed success honors the contract."""
        result = ContextExpectations(success=["a", "exposed"])
        assert result.success("a", a=1).and_expose("exposed", ["a"]).is_success("exposed")
        with pytest.raises(UnexpectedTypeError):
            result.success("a", a=1).and_expose("other", ["a"])


class TestContinuation:
    """Tests for chains built from continued successes."""

    def test_division(self, continuation_settings: Settings) -> None:
        """Test the happy path."""
        result = Divide(continuation_settings).call(20, 2)
        assert result.is_success("division_completed")
        assert result.value["number"] == 5
        assert result.halted

    @pytest.mark.parametrize(
        "arg1,arg2,type_,message",
        [
            ("10", 0, "invalid_arg", "arg1 must be numeric"),
            (10, "2", "invalid_arg", "arg2 must be numeric"),
            (10, 0, "division_by_zero", "arg2 must not be zero"),
        ],
    )
    def test_division_failures(
        self,
        continuation_settings: Settings,
        arg1: Any,
        arg2: Any,
        type_: str,
        message: str,
    ) -> None:
        """Test that each failing step stops the chain."""
        result = Divide(continuation_settings).call(arg1, arg2)
        assert result.is_failure(type_)
        assert result.value == {"message": message}

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_first_plain_success_halts(self, continuation_settings: Settings, position: int) -> None:
        """Test that a non-continued success ends the chain."""
        result = ContextResultFactory(config=continuation_settings)
        steps = [
            lambda _: result.continue_(first=True),
            lambda _: result.continue_(second=True),
            lambda _: result.continue_(third=True),
        ]
        steps[position] = lambda _: result.success(f"step_{position}")

        outcome = steps[0](None)
        for step in steps[1:]:
            outcome = outcome.and_then(step)

        assert outcome.is_success(f"step_{position}")
        assert outcome.halted

    def test_continue_is_not_halted(self, continuation_settings: Settings) -> None:
        """Test the reserved continued success."""
        continued = ContextResultFactory(config=continuation_settings).continue_(a=1)
        assert continued.is_success("continued")
        assert not continued.halted
        assert continued.value == {"a": 1}

    def test_success_without_addon_is_not_halted(self, test_settings: Settings) -> None:
        """Test plain successes when the addon is off."""
        assert not ContextResultFactory(config=test_settings).success("ok").halted
