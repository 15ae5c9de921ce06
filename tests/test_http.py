"""
Tests for the request executor: URL building, auth headers, status contract.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from shipyard_cli.api import HTTPClient, encode_body, decode_body, decode_list
from shipyard_cli.config import ShipyardConfig
from shipyard_cli.exceptions import (
    CodecError,
    ErrorKind,
    RequestError,
    ShipyardError,
    TransportError,
    UnauthorizedError,
)

from conftest import BASE_URL, make_response, sent


class TestBuildUrl:
    """Tests for URL construction."""

    def test_concatenates_base_and_path(self, http):
        assert http.build_url("/api/containers") == f"{BASE_URL}/api/containers"

    def test_no_slash_normalization(self, session):
        http = HTTPClient(ShipyardConfig(url="http://host/"), session=session)
        assert http.build_url("/api/engines") == "http://host//api/engines"

    def test_query_string_passed_through(self, http, session):
        session.request.return_value = make_response(201, [])
        http.request("POST", "/api/containers?count=2&pull=false", expected_status=201)
        assert sent(session)["url"] == f"{BASE_URL}/api/containers?count=2&pull=false"


class TestAuthHeaders:
    """Tests for credential header selection."""

    def test_access_token_header(self, http, session):
        http.request("GET", "/api/containers")
        assert sent(session)["headers"] == {"X-Access-Token": "admin:tok3n"}

    def test_service_key_takes_priority(self, session):
        config = ShipyardConfig(url=BASE_URL, username="admin", token="tok3n", service_key="sk-1")
        HTTPClient(config, session=session).request("GET", "/api/containers")

        headers = sent(session)["headers"]
        assert headers == {"X-Service-Key": "sk-1"}
        assert "X-Access-Token" not in headers

    def test_empty_credentials_still_send_access_token(self, session):
        HTTPClient(ShipyardConfig(url=BASE_URL), session=session).request("GET", "/api/events")
        assert sent(session)["headers"] == {"X-Access-Token": ":"}

    def test_no_content_type_header(self, http, session):
        session.request.return_value = make_response(201)
        http.request("POST", "/api/engines", body=b'{"id": "e1"}', expected_status=201)

        kwargs = sent(session)
        assert kwargs["data"] == b'{"id": "e1"}'
        assert "Content-Type" not in kwargs["headers"]
        assert "json" not in kwargs


class TestRequest:
    """Tests for status interpretation and error classification."""

    def test_expected_status_returns_response(self, http, session):
        response = make_response(200, '[{"id": "a"}]')
        session.request.return_value = response

        assert http.request("GET", "/api/containers") is response
        assert sent(session)["method"] == "GET"
        assert sent(session)["data"] is None

    def test_injected_session_keeps_its_timeout_policy(self, http, session):
        http.request("GET", "/api/containers")
        assert "timeout" not in sent(session)

    def test_unauthorized_before_expected_check(self, http, session):
        session.request.return_value = make_response(401, "not authorized")

        with pytest.raises(UnauthorizedError) as exc_info:
            http.request("GET", "/api/containers", expected_status=200)

        assert exc_info.value.kind == ErrorKind.UNAUTHORIZED
        assert not isinstance(exc_info.value, RequestError)

    def test_unauthorized_even_when_expected(self, http, session):
        session.request.return_value = make_response(401)

        with pytest.raises(UnauthorizedError):
            http.request("GET", "/api/containers", expected_status=401)

    def test_unexpected_status_carries_body(self, http, session):
        session.request.return_value = make_response(500, "engine unreachable\n")

        with pytest.raises(RequestError) as exc_info:
            http.request("DELETE", "/api/containers/x1", expected_status=204)

        assert str(exc_info.value) == "engine unreachable\n"
        assert exc_info.value.status_code == 500
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_STATUS

    def test_json_error_body_not_parsed(self, http, session):
        session.request.return_value = make_response(400, '{"error": "bad image"}')

        with pytest.raises(RequestError) as exc_info:
            http.request("POST", "/api/containers?count=1&pull=false", expected_status=201)

        assert exc_info.value.message == '{"error": "bad image"}'

    def test_error_body_decoded_as_utf8_without_charset(self, http, session):
        # text/plain with no charset makes requests assume ISO-8859-1
        session.request.return_value = make_response(
            500,
            "contêiner não encontrado".encode("utf-8"),
            headers={"Content-Type": "text/plain"},
        )

        with pytest.raises(RequestError) as exc_info:
            http.request("GET", "/api/containers/x1")

        assert exc_info.value.message == "contêiner não encontrado"

    def test_unauthorized_details_decoded_as_utf8(self, http, session):
        session.request.return_value = make_response(
            401,
            "sessão expirada".encode("utf-8"),
            headers={"Content-Type": "text/plain"},
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            http.request("GET", "/api/containers")

        assert exc_info.value.details == "sessão expirada"

    def test_invalid_utf8_error_body_replaced(self, http, session):
        session.request.return_value = make_response(500, b"bad \xff byte")

        with pytest.raises(RequestError) as exc_info:
            http.request("GET", "/api/events")

        assert exc_info.value.message == "bad \ufffd byte"

    def test_success_status_other_than_expected_is_error(self, http, session):
        session.request.return_value = make_response(200, "[]")

        with pytest.raises(RequestError):
            http.request("POST", "/api/engines", expected_status=201)

    def test_transport_error(self, http, session):
        cause = requests.exceptions.ConnectionError("connection refused")
        session.request.side_effect = cause

        with pytest.raises(TransportError) as exc_info:
            http.request("GET", "/api/containers")

        assert exc_info.value.kind == ErrorKind.TRANSPORT
        assert exc_info.value.__cause__ is cause
        assert session.request.call_count == 1

    def test_timeout_not_retried(self, http, session):
        session.request.side_effect = requests.exceptions.Timeout("timed out")

        with pytest.raises(TransportError):
            http.request("GET", "/api/events")

        assert session.request.call_count == 1

    def test_all_errors_share_base_class(self):
        for error in (TransportError("x"), UnauthorizedError(), RequestError("x"), CodecError("x")):
            assert isinstance(error, ShipyardError)


class TestSession:
    """Tests for transport ownership."""

    def test_private_session_created_lazily(self):
        config = ShipyardConfig(url=BASE_URL, verify_ssl=False)
        with patch("shipyard_cli.api._http.requests.Session") as session_cls:
            http = HTTPClient(config)
            session_cls.assert_not_called()

            session = http.session

            session_cls.assert_called_once()
            assert session.verify is False

            http.close()
            session.close.assert_called_once()

    def test_private_session_gets_configured_timeout(self, config):
        with patch("shipyard_cli.api._http.requests.Session") as session_cls:
            session = session_cls.return_value
            session.request.return_value = make_response(200, [])

            HTTPClient(config).request("GET", "/api/containers")

            assert session.request.call_args.kwargs["timeout"] == 10

    def test_injected_session_not_closed(self, config):
        session = MagicMock(spec=requests.Session)
        with HTTPClient(config, session=session) as http:
            assert http.session is session
        session.close.assert_not_called()


class TestCodec:
    """Tests for JSON encode/decode helpers."""

    def test_encode_dict(self):
        assert encode_body({"name": "nginx"}) == b'{"name": "nginx"}'

    def test_encode_failure(self):
        with pytest.raises(CodecError) as exc_info:
            encode_body({"when": object()})
        assert exc_info.value.kind == ErrorKind.CODEC
        assert isinstance(exc_info.value.original, TypeError)

    def test_decode_list_empty_array(self):
        result = decode_list(make_response(200, "[]"))
        assert result == []

    def test_decode_list_null(self):
        assert decode_list(make_response(200, "null")) == []

    def test_decode_list_rejects_object(self):
        with pytest.raises(CodecError):
            decode_list(make_response(200, '{"id": "a"}'))

    def test_decode_empty_body_is_error(self):
        with pytest.raises(CodecError):
            decode_body(make_response(200, b""))

    def test_decode_malformed_body_is_error(self):
        with pytest.raises(CodecError):
            decode_list(make_response(200, "[{"))

    @pytest.mark.parametrize("record", [
        {"id": "c1", "image": {"name": "nginx", "environment": {"A": "1"}}, "state": "running"},
        {"id": "local", "engine": {"id": "local", "addr": "http://10.0.0.5:2375", "labels": ["dev"]}},
        {"username": "alice", "password": "", "role": {"name": "admin"}},
        {"key": "sk-1", "description": "ci runner"},
    ])
    def test_echo_round_trip(self, http, session, record):
        session.request.side_effect = lambda **kwargs: make_response(200, kwargs["data"])

        response = http.request("POST", "/echo", body=encode_body(record))

        assert decode_body(response) == record
