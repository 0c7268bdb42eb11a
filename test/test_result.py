import pytest
from hypothesis import given
from hypothesis.strategies import builds, booleans, text, integers, none, one_of

from pureresult import Outcome, Ok, Failure, of_value, of_error, MissingArgumentError


payloads = one_of(integers(), text(), booleans(), none())
outcomes = builds(lambda b, p: of_value(p) if b else of_error(p), booleans(), payloads)


def identity(x):
    return x


def never(_):
    raise AssertionError("must not be called")


@given(outcomes)
def test_exactly_one_case(r):
    assert r.is_success() != r.is_failure()
    assert bool(r) == r.is_success()
    assert isinstance(r, Ok) == r.is_success()
    assert isinstance(r, Failure) == r.is_failure()


@given(payloads)
def test_of_value(v):
    r = of_value(v)
    assert r.is_success() and not r.is_failure()
    assert r.value == v
    assert r.error_descriptor is None


@given(payloads)
def test_of_error(d):
    r = Outcome.of_error(d)
    assert r.is_failure() and not r.is_success()
    assert r.error_descriptor == d
    assert r.value is None


@given(payloads)
def test_equality_depends_on_case(p):
    assert of_value(p) == of_value(p)
    assert of_error(p) == of_error(p)
    assert of_value(p) != of_error(p)


@given(outcomes)
def test_identity_map(r):
    mapped = r.map(identity, identity)
    assert mapped == r
    assert mapped is not r


@given(outcomes)
def test_round_trip(r):
    if r.is_success():
        assert of_value(r.value) == r
    else:
        assert of_error(r.error_descriptor) == r


@given(outcomes)
def test_dispatch_returns_same_instance(r):
    seen = []
    assert r.call(seen.append, seen.append) is r
    assert r.call_on_success(seen.append) is r
    assert r.call_on_error(seen.append) is r
    assert len(seen) == 2


def test_none_payload_keeps_case():
    assert of_value(None).is_success()
    assert of_error(None).is_failure()
    assert of_value(None) != of_error(None)


def test_immutable():
    r = of_value(1)
    with pytest.raises(AttributeError):
        r.value = 2  # type: ignore[misc]


def test_map_value():
    assert of_value("value").map_value(str.upper) == Ok("VALUE")
    assert of_value("value").map(str.upper, never) == Ok("VALUE")


def test_map_error_descriptor():
    r = of_value("value").map_error_descriptor(never)
    assert r == Ok("value")

    e = of_error("ouch").map_error_descriptor(str.upper)
    assert e == Failure("OUCH")
    assert of_error("ouch").map_value(never) == Failure("ouch")


def test_call_success():
    seen = []
    r = of_value(42)
    assert r.call(seen.append, never) is r
    assert seen == [42]


def test_call_failure():
    seen = []
    error = RuntimeError()
    r = of_error(error)
    assert r.call(never, seen.append) is r
    assert seen == [error]


def test_call_on_side_is_noop_for_other_case():
    assert of_value(1).call_on_error(never) == Ok(1)
    assert of_error(1).call_on_success(never) == Failure(1)


def test_call_on_success_tolerates_none():
    seen = []
    of_value(None).call_on_success(seen.append)
    assert seen == [None]


def test_missing_arguments_fail_before_branching():
    r = of_value(1)
    with pytest.raises(MissingArgumentError) as exc:
        r.map(identity, None)  # type: ignore[arg-type]
    assert exc.value.argument == "error_mapper"

    with pytest.raises(MissingArgumentError):
        r.call(print, None)  # type: ignore[arg-type]
    with pytest.raises(MissingArgumentError):
        r.call_on_error(None)  # type: ignore[arg-type]
    with pytest.raises(MissingArgumentError):
        of_error(1).call_on_success(None)  # type: ignore[arg-type]
    with pytest.raises(MissingArgumentError):
        of_error(1).map_value(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        r.map_error_descriptor(None)  # type: ignore[arg-type]


def test_match_cases():
    match of_error("ouch"):
        case Ok(v):
            pytest.fail(f"unexpected value {v}")
        case Failure(d):
            assert d == "ouch"


def test_only_the_two_cases_can_be_built():
    with pytest.raises(TypeError):
        Outcome()

    class Neither(Outcome):
        pass

    with pytest.raises(TypeError):
        Neither()


@given(outcomes)
def test_hashable(r):
    assert hash(r) == hash(r.map(identity, identity))
    assert r in {r.map(identity, identity)}


def test_hash_depends_on_case():
    assert len({of_value(1), of_value(1), of_error(1)}) == 2
