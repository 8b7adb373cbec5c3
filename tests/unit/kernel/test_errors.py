"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from kv_keystore.kernel.errors import (
    AlreadyExistsError,
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotAllowedError,
    NotFoundError,
    ProtocolViolationError,
    RemoteError,
    TimeoutError,
    TransportError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "keystore_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_str_is_message(self) -> None:
        assert str(BaseError("readable")) == "readable"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_json_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(err.to_json())
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestDomainErrors:
    def test_not_found_formats_key(self) -> None:
        err = NotFoundError("db-password")
        assert err.key == "db-password"
        assert "db-password" in err.message
        assert err.code == "not_found"

    def test_not_found_without_key(self) -> None:
        err = NotFoundError()
        assert err.key is None
        assert "does not exist" in err.message

    def test_already_exists_is_conflict(self) -> None:
        err = AlreadyExistsError("k")
        assert isinstance(err, ConflictError)
        assert isinstance(err, DomainError)
        assert err.code == "already_exists"
        assert "already exists" in err.message

    def test_custom_message(self) -> None:
        assert NotFoundError("k", "gone").message == "gone"


class TestApplicationErrors:
    def test_not_allowed_stores_operation(self) -> None:
        err = NotAllowedError("read-only", operation="set")
        assert err.operation == "set"
        assert err.code == "not_allowed"
        assert isinstance(err, ApplicationError)

    def test_not_allowed_default_message(self) -> None:
        assert NotAllowedError().message == "Operation not allowed"


class TestInfrastructureErrors:
    def test_transport_error_default_message(self) -> None:
        err = TransportError("https://credhub:8844")
        assert err.resource == "https://credhub:8844"
        assert "credhub" in err.message

    def test_timeout_is_transport_error(self) -> None:
        err = TimeoutError("https://credhub:8844", "too slow")
        assert isinstance(err, TransportError)
        assert err.code == "timeout"

    def test_remote_error_carries_response(self) -> None:
        err = RemoteError("credhub", "boom", status_code=500, status="500 Internal Server Error", body="{}")
        assert err.status_code == 500
        assert err.status == "500 Internal Server Error"
        assert err.body == "{}"
        assert isinstance(err, InfrastructureError)

    def test_protocol_violation_payload_type(self) -> None:
        err = ProtocolViolationError("bad JSON", payload_type="json")
        assert err.payload_type == "json"
        assert err.code == "protocol_violation"

    @pytest.mark.parametrize(
        "cls",
        [NotFoundError, AlreadyExistsError, NotAllowedError, ProtocolViolationError],
    )
    def test_all_inherit_base_error(self, cls: type) -> None:
        assert issubclass(cls, BaseError)
