import pytest

from jsonrpc_post.codec import Record
from jsonrpc_post.errors import (
    INVALID_JSON,
    METHOD_NOT_FOUND,
    ErrorCode,
    RpcError,
    SyncContextError,
)


def test_standard_codes():
    assert ErrorCode.INVALID_JSON == -32700
    assert ErrorCode.INVALID_REQUEST == -32600
    assert ErrorCode.METHOD_NOT_FOUND == -32601
    assert ErrorCode.INVALID_PARAMS == -32602
    assert ErrorCode.INTERNAL_ERROR == -32603
    assert INVALID_JSON is ErrorCode.INVALID_JSON


def test_diagnostic_string_format():
    err = RpcError("Method not found: dummy", -32601, None)
    assert err.to_diagnostic_string() == "RpcError: Method not found: dummy, code: -32601, data: None"
    assert repr(err) == err.to_diagnostic_string()
    assert str(err) == "Method not found: dummy"


def test_diagnostic_string_uses_plain_int_for_enum_codes():
    err = RpcError("bad json", INVALID_JSON, "line 1")
    assert err.code == -32700
    assert type(err.code) is int
    assert err.to_diagnostic_string() == "RpcError: bad json, code: -32700, data: 'line 1'"


def test_diagnostic_string_without_code():
    assert RpcError("boom").to_diagnostic_string() == "RpcError: boom, code: None, data: None"


def test_error_is_read_only():
    err = RpcError("x", METHOD_NOT_FOUND, {"k": 1})
    with pytest.raises(AttributeError):
        err.code = 1
    with pytest.raises(AttributeError):
        err.data = None
    assert err.to_dict() == {"code": -32601, "message": "x", "data": {"k": 1}}


def test_from_payload_accepts_dict_and_symbolic_record():
    from_dict = RpcError.from_payload({"code": -32601, "message": "Method not found: foo"})
    assert (from_dict.code, from_dict.message, from_dict.data) == (-32601, "Method not found: foo", None)

    record = Record(code=-32602, message="Invalid params", data=Record(field="uid"))
    from_record = RpcError.from_payload(record)
    assert from_record.code == -32602
    assert from_record.message == "Invalid params"
    assert from_record.data.field == "uid"


def test_from_payload_non_object_and_odd_codes():
    err = RpcError.from_payload("backend exploded")
    assert err.message == "backend exploded"
    assert err.code is None

    err = RpcError.from_payload({"code": "E_BAD", "message": "nope"})
    assert err.code is None
    assert err.message == "nope"


def test_sync_context_error_is_not_an_rpc_error():
    err = SyncContextError()
    assert isinstance(err, RuntimeError)
    assert not isinstance(err, RpcError)
    assert "run_sync" in str(err)
