import pytest

from rpcgate.api.rpc.request_guard import check_content_type, check_http_method, parse_rpc_body
from rpcgate.utils.exceptions import PARSE_ERROR, ParseError


def test_check_http_method_accepts_post_only():
    check_http_method("POST")
    check_http_method("post")
    for verb in ("GET", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"):
        with pytest.raises(ParseError) as exc_info:
            check_http_method(verb)
        assert exc_info.value.message == "invalid HTTP method"
        assert exc_info.value.rpc_code == PARSE_ERROR


def test_parse_single_object_is_singular():
    parsed = parse_rpc_body(b'{"id": 1, "jsonrpc": "2.0", "method": "FooBar", "params": {"foo": "x"}}')
    assert parsed.singular is True
    assert len(parsed.requests) == 1
    req = parsed.requests[0]
    assert req.id == 1
    assert req.method == "FooBar"
    assert req.params == {"foo": "x"}
    assert req.has_id is True


def test_parse_array_is_batch_even_with_one_element():
    parsed = parse_rpc_body(b'[{"id": "a", "method": "FooBar"}]')
    assert parsed.singular is False
    assert [r.id for r in parsed.requests] == ["a"]


def test_parse_empty_array():
    parsed = parse_rpc_body(b"[]")
    assert parsed.singular is False
    assert parsed.requests == []


def test_parse_keeps_order_and_id_types():
    parsed = parse_rpc_body(b'[{"id": 2, "method": "b"}, {"id": "1", "method": "a"}, {"method": "c"}, {"id": null, "method": "d"}]')
    assert [r.method for r in parsed.requests] == ["b", "a", "c", "d"]
    assert parsed.requests[0].id == 2
    assert parsed.requests[1].id == "1"
    assert parsed.requests[2].has_id is False
    assert parsed.requests[3].has_id is True
    assert parsed.requests[3].id is None


def test_parse_missing_method_is_empty_name():
    parsed = parse_rpc_body(b'{"id": 1, "jsonrpc": "2.0"}')
    assert parsed.requests[0].method == ""


def test_parse_garbage_raises_parse_error():
    with pytest.raises(ParseError) as exc_info:
        parse_rpc_body(b"\n    ASDKLASDJLAKSJDLKASJADS\n    ")
    assert exc_info.value.rpc_code == PARSE_ERROR
    assert "Invalid JSON" in exc_info.value.message


def test_parse_failure_reports_array_attempt_message():
    # Valid JSON that is neither a list nor a request object.
    with pytest.raises(ParseError) as exc_info:
        parse_rpc_body(b'"just a string"')
    assert "list" in exc_info.value.message.lower()


def test_check_content_type_declared_but_not_enforced_by_default():
    check_content_type("text/plain", accept=["application/json"], enforce=False)


def test_check_content_type_enforced():
    accept = ["application/json", "text/json"]
    check_content_type("application/json; charset=utf-8", accept=accept, enforce=True)
    check_content_type("TEXT/JSON", accept=accept, enforce=True)
    with pytest.raises(ParseError) as exc_info:
        check_content_type("text/plain", accept=accept, enforce=True)
    assert exc_info.value.message == "unsupported content type: text/plain"
    with pytest.raises(ParseError):
        check_content_type(None, accept=accept, enforce=True)


def test_parse_malformed_element_keeps_siblings():
    parsed = parse_rpc_body(
        b'[{"id": 1, "method": null}, {"id": {"k": 1}, "method": "FooBar"},'
        b' {"id": 3, "method": 7}, {"id": 4, "method": "FooBar"}]'
    )
    assert parsed.singular is False
    assert [r.method for r in parsed.requests] == ["", "", "", "FooBar"]
    assert [r.id for r in parsed.requests] == [1, None, 3, 4]
    assert parsed.requests[1].has_id is True
