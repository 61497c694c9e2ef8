from pydantic import BaseModel, ValidationError

from rpcgate.api.rpc.error_boundary import (
    action_error,
    classify_http_status,
    format_validation_error,
    invalid_params_error,
    unknown_method_error,
)
from rpcgate.utils.exceptions import InternalError, MethodError, ParseError


class _Shape(BaseModel):
    a: int
    b: str


def _validation_error() -> ValidationError:
    try:
        _Shape.model_validate({"a": "x"})
    except ValidationError as exc:
        return exc
    raise AssertionError("expected a validation error")


def test_format_validation_error_flattens_locations():
    text = format_validation_error(_validation_error())
    assert text.startswith("a: ")
    assert "; b: " in text
    assert "\n" not in text


def test_unknown_method_error():
    err = unknown_method_error("x.y")
    assert err.to_error_payload() == {"code": -32601, "message": "method name `x.y` does not exist"}


def test_invalid_params_error_maps_both_kinds():
    assert invalid_params_error(_validation_error()).rpc_code == -32602
    err = invalid_params_error(ValueError("too big"))
    assert err.to_error_payload() == {"code": -32602, "message": "too big"}


def test_action_error_maps_to_internal_error():
    err = action_error(RuntimeError("boom"))
    assert err.to_error_payload() == {"code": -32603, "message": "boom"}


def test_action_error_keeps_method_error():
    original = MethodError("nope", data="extra")
    assert action_error(original) is original


def test_classify_http_status():
    assert classify_http_status(ParseError("bad")) == 400
    assert classify_http_status(InternalError("bad")) == 500
