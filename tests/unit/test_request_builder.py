"""
Unit tests for turning endpoints into httpx requests.
"""
import json

from pydantic import BaseModel

from adapters.request_builder import build_request, encode_body, resolve_url
from core.domain.endpoint import (
    APIEndpoint,
    ClientConfiguration,
    DictBody,
    EncodableBody,
    HTTPMethod,
    RawBody,
)

CONFIG = ClientConfiguration(
    base_url="https://api.example.test",
    base_headers={"Content-Type": "application/json;charset=utf-8", "X-Base": "base"},
)


class Payload(BaseModel):
    name: str
    count: int


class TestResolveUrl:
    def test_joins_base_and_path(self):
        url = resolve_url(APIEndpoint(path="/users"), CONFIG)
        assert str(url) == "https://api.example.test/users"

    def test_appends_sorted_query_parameters(self):
        endpoint = APIEndpoint(path="/users", url_queries={"since": "40", "per_page": "20"})
        url = resolve_url(endpoint, CONFIG)
        assert str(url) == "https://api.example.test/users?per_page=20&since=40"

    def test_keeps_base_path_prefix(self):
        configuration = ClientConfiguration(base_url="https://ghe.example.test/api/v3/")
        url = resolve_url(APIEndpoint(path="/users"), configuration)
        assert str(url) == "https://ghe.example.test/api/v3/users"

    def test_endpoint_base_url_wins(self):
        endpoint = APIEndpoint(path="/users", base_url="https://other.example.test")
        assert resolve_url(endpoint, CONFIG).host == "other.example.test"

    def test_missing_base_url(self):
        assert resolve_url(APIEndpoint(path="/users"), ClientConfiguration.default()) is None

    def test_relative_base_url_is_rejected(self):
        configuration = ClientConfiguration(base_url="not a url")
        assert resolve_url(APIEndpoint(path="/users"), configuration) is None


class TestBuildRequest:
    def test_no_base_url_yields_no_request(self):
        assert build_request(APIEndpoint(path="/users"), ClientConfiguration.default()) is None

    def test_method_and_headers(self):
        endpoint = APIEndpoint(
            path="/users",
            method=HTTPMethod.PATCH,
            headers={"X-Base": "override", "X-Call": "call"},
        )
        request = build_request(endpoint, CONFIG)

        assert request.method == "PATCH"
        assert request.headers["Content-Type"] == "application/json;charset=utf-8"
        assert request.headers["X-Base"] == "override"
        assert request.headers["X-Call"] == "call"

    def test_header_override_ignores_case(self):
        endpoint = APIEndpoint(path="/users", headers={"content-type": "text/plain"})
        request = build_request(endpoint, CONFIG)
        assert request.headers.get_list("Content-Type") == ["text/plain"]

    def test_get_without_body_has_empty_content(self):
        request = build_request(APIEndpoint(path="/users"), CONFIG)
        assert request.content == b""


class TestEncodeBody:
    def test_none(self):
        assert encode_body(None) is None

    def test_raw_bytes_pass_through(self):
        assert encode_body(RawBody(b"\x00\x01raw")) == b"\x00\x01raw"

    def test_dictionary_uses_dump_options(self):
        body = DictBody({"b": 1, "a": 2}, options={"sort_keys": True, "separators": (",", ":")})
        assert encode_body(body) == b'{"a":2,"b":1}'

    def test_pydantic_model_default_encoder(self):
        encoded = encode_body(EncodableBody(Payload(name="x", count=2)))
        assert json.loads(encoded) == {"name": "x", "count": 2}

    def test_plain_object_default_encoder(self):
        assert json.loads(encode_body(EncodableBody([1, 2, 3]))) == [1, 2, 3]

    def test_custom_encoder(self):
        body = EncodableBody("hello", encoder=lambda value: value.upper().encode())
        assert encode_body(body) == b"HELLO"

    def test_unserializable_dictionary_becomes_no_body(self):
        assert encode_body(DictBody({"when": object()})) is None

    def test_failing_encoder_becomes_no_body(self):
        def broken(value):
            raise TypeError("cannot encode")

        assert encode_body(EncodableBody("x", encoder=broken)) is None

    def test_request_is_still_built_when_body_fails(self):
        endpoint = APIEndpoint(path="/users", method=HTTPMethod.POST, body=DictBody({"x": {1, 2}}))
        request = build_request(endpoint, CONFIG)
        assert request is not None
        assert request.content == b""

    def test_request_carries_encoded_body(self):
        endpoint = APIEndpoint(path="/users", method=HTTPMethod.POST, body=DictBody({"login": "a"}))
        request = build_request(endpoint, CONFIG)
        assert json.loads(request.content) == {"login": "a"}

    def test_encoder_raising_any_exception_becomes_no_body(self):
        body = EncodableBody(object(), encoder=lambda value: value.to_json())
        assert encode_body(body) is None

    def test_encoder_returning_str_is_utf8_encoded(self):
        body = EncodableBody("ñandú", encoder=lambda value: value)
        assert encode_body(body) == "ñandú".encode("utf-8")

    def test_encoder_returning_non_bytes_becomes_no_body(self):
        body = EncodableBody("x", encoder=lambda value: {"value": value})
        assert encode_body(body) is None

    def test_request_is_still_built_when_encoder_returns_non_bytes(self):
        endpoint = APIEndpoint(
            path="/users",
            method=HTTPMethod.POST,
            body=EncodableBody("x", encoder=lambda value: {"value": value}),
        )
        request = build_request(endpoint, CONFIG)
        assert request is not None
        assert request.content == b""
