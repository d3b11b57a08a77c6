"""Unit tests for Ok/Err results."""

import pytest

from ordertaking.domain.exceptions import ValidationError
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Ok, collect


class TestOk:

    def test_map(self):
        assert Ok(2).map(lambda n: n * 10) == Ok(20)

    def test_bind_chains(self):
        assert Ok(2).bind(lambda n: Ok(n + 1)) == Ok(3)
        assert Ok(2).bind(lambda n: Err("nope")) == Err("nope")

    def test_unwrap(self):
        assert Ok("v").unwrap() == "v"
        assert Ok("v").unwrap_or("default") == "v"
        assert Ok("v").ok is True


class TestErr:

    def test_map_and_bind_short_circuit(self):
        calls = []
        err = Err("boom")
        assert err.map(calls.append) is err
        assert err.bind(calls.append) is err
        assert calls == []

    def test_unwrap_raises_with_message(self):
        violation = ConstraintViolation.empty_input("Name")
        with pytest.raises(ValidationError, match="Name must not be empty"):
            Err(violation).unwrap()

    def test_unwrap_or(self):
        assert Err("boom").unwrap_or("default") == "default"
        assert Err("boom").ok is False


class TestCollect:

    def test_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_every_error_kept_in_order(self):
        assert collect([Err("a"), Ok(2), Err("b")]) == Err(("a", "b"))

    def test_empty(self):
        assert collect([]) == Ok([])
