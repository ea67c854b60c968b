"""Tests for roost.server.negotiation: return value to Response."""

import pytest
from pydantic import BaseModel, Field

from roost.errors import ConfigurationError
from roost.http.response import Response
from roost.server.negotiation import negotiate


class Thing(BaseModel):
    id: str = Field(alias="_id")
    name: str


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        response = Response(body="x", status=202)
        assert negotiate(response) is response

    def test_none_is_204(self) -> None:
        assert negotiate(None).status == 204

    def test_model_uses_aliases(self) -> None:
        response = negotiate(Thing(_id="t1", name="one"))
        assert response.content_type == "application/json"
        assert response.json_body() == {"_id": "t1", "name": "one"}

    def test_dict_and_list(self) -> None:
        assert negotiate({"a": 1}).json_body() == {"a": 1}
        assert negotiate([1, 2]).json_body() == [1, 2]

    def test_str(self) -> None:
        response = negotiate("pong")
        assert response.text == "pong"
        assert response.content_type.startswith("text/plain")

    def test_bytes(self) -> None:
        assert negotiate(b"\x00").content_type == "application/octet-stream"

    def test_status_tuple(self) -> None:
        response = negotiate(({"created": True}, 201))
        assert response.status == 201

    def test_status_and_headers_tuple(self) -> None:
        response = negotiate(("moved", 201, {"Location": "/things/1"}))
        assert response.header("Location") == "/things/1"

    def test_unsupported(self) -> None:
        with pytest.raises(ConfigurationError):
            negotiate(object())
