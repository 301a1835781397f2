import pytest
from pydantic import BaseModel, ValidationError

from envelope import UINT32_MAX, Response, UnwrapError


class Holding(BaseModel):
    ticker: str
    volume: int


@pytest.mark.parametrize("payload", [42, "", 0, False, [], [1, 2, 3], {"a": 1}])
def test_ok_populates_data_only(payload):
    resp = Response.ok(payload)
    assert resp.success is True
    assert resp.data == payload
    assert resp.error is None
    assert resp.is_ok and not resp.is_err


@pytest.mark.parametrize("code", [0, 1, 404, UINT32_MAX])
def test_err_populates_error_only(code):
    resp = Response.err(code)
    assert resp.success is False
    assert resp.data is None
    assert resp.error == code
    assert resp.is_err and not resp.is_ok


def test_scenario_records():
    assert Response[int].ok(42).to_record() == {"success": True, "data": 42, "error": None}
    assert Response[int].err(404).to_record() == {"success": False, "data": None, "error": 404}
    # empty payload stays an empty string, not null
    assert Response[str].ok("").to_record() == {"success": True, "data": "", "error": None}


def test_equality_is_structural():
    assert Response[int].ok(7) == Response[int].ok(7)
    assert Response[int].err(3) == Response[int].err(3)
    assert Response[int].ok(7) != Response[int].ok(8)
    assert Response[int].err(3) != Response[int].err(4)
    assert Response[int].ok(3) != Response[int].err(3)


def test_composite_payload():
    holding = Holding(ticker="FPT", volume=100)
    resp = Response[Holding].ok(holding)
    assert resp.data == holding
    assert resp == Response[Holding].ok(Holding(ticker="FPT", volume=100))


def test_parametrized_payload_is_validated():
    with pytest.raises(ValidationError):
        Response[int].ok("not a number")


def test_response_is_immutable():
    resp = Response[int].ok(1)
    with pytest.raises(ValidationError):
        resp.success = False
    with pytest.raises(ValidationError):
        resp.error = 5


@pytest.mark.parametrize("code", [-1, UINT32_MAX + 1, True, "404", 4.0])
def test_err_rejects_values_outside_uint32(code):
    with pytest.raises(ValidationError):
        Response.err(code)


@pytest.mark.parametrize(
    "fields",
    [
        {"success": True, "data": 1, "error": 2},
        {"success": False},
        {"success": False, "data": 1, "error": 2},
        {"success": False, "data": 1},
    ],
)
def test_both_or_neither_side_is_rejected(fields):
    with pytest.raises(ValidationError):
        Response(**fields)


def test_ok_with_none_payload():
    # success decides the outcome when the payload itself is None
    resp = Response.ok(None)
    assert resp.is_ok
    assert resp.data is None and resp.error is None


def test_unwrap():
    assert Response[int].ok(5).unwrap() == 5
    with pytest.raises(UnwrapError) as exc_info:
        Response[int].err(404).unwrap()
    assert exc_info.value.error_code == 404
    assert exc_info.value.status_code == 500


def test_unwrap_or():
    assert Response[int].ok(5).unwrap_or(0) == 5
    assert Response[int].err(1).unwrap_or(0) == 0
    assert Response[str].ok("").unwrap_or("fallback") == ""


def test_ok_owns_a_copy_of_the_payload():
    holding = Holding(ticker="FPT", volume=100)
    resp = Response[Holding].ok(holding)
    holding.ticker = "VNM"
    assert resp.data is not holding
    assert resp.data.ticker == "FPT"

    values = [1, 2, 3]
    resp = Response.ok(values)
    values.append(4)
    assert resp.data == [1, 2, 3]
