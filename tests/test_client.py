from __future__ import annotations

import logging
from typing import Any

import httpx
import pytest

from ryandata_usps import (
    PRODUCTION_SERVER_URL,
    PRODUCTION_TOKEN_URL,
    Address,
    ClientConfig,
    ConfigurationError,
    InputValidationError,
    TokenError,
    TransportError,
    UnexpectedResponseError,
    UspsAddressClient,
    UspsApiError,
)
from ryandata_usps.models.enums import SECONDARY_NOT_CONFIRMED_MESSAGE
from tests.stubs import StubUsps, respond_with


def test_validate_address_maps_canonical_address() -> None:
    stub = StubUsps()
    client = stub.make_client()

    results = client.validate_address(
        Address(street_address="350 Fifth Avenue", city="New York", state="ny", zip_code="10118")
    )

    assert len(results) == 1
    result = results[0]
    assert result.address.street_address == "350 5TH AVE"
    assert result.address.firm == "EMPIRE STATE BUILDING"
    assert result.address.full_zip == "10118-0110"
    assert result.address.secondary_address == ""
    assert result.corrections == ()
    assert [m.code for m in result.matches] == ["31"]
    assert result.warnings == ()
    assert result.additional_info is not None
    assert result.additional_info.carrier_route == "C000"
    assert result.dpv_confirmation == "Y"


def test_request_targets_address_endpoint_with_bearer_token() -> None:
    stub = StubUsps(token="secret-token")
    client = stub.make_client()

    client.validate_address(Address(street_address="1 Apple Park Way", state="CA"))

    request = stub.address_requests[0]
    assert request.method == "GET"
    assert request.url.path == "/addresses/v3/address"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Accept"] == "application/json"


def test_token_fetched_once_and_attached_to_every_request() -> None:
    stub = StubUsps()
    client = stub.make_client()
    address = Address(street_address="100 broadway", city="boulder", state="co")

    client.validate_address(address)
    client.validate_address(address)

    assert len(stub.token_requests) == 1
    assert len(stub.address_requests) == 2
    assert all(r.headers["Authorization"] == "Bearer token-1" for r in stub.address_requests)


def test_minimal_address_sends_only_required_params() -> None:
    stub = StubUsps()
    client = stub.make_client()

    client.validate_address(Address(street_address="100 broadway", state="co"))

    params = stub.address_requests[0].url.params
    assert dict(params) == {"streetAddress": "100 broadway", "state": "CO"}


def test_optional_params_sent_when_present() -> None:
    stub = StubUsps()
    client = stub.make_client()

    client.validate_address(
        Address(
            firm="Chipotle",
            street_address="28th",
            secondary_address="Ste 100",
            city="boulder",
            state="co",
            zip_code="80301",
            urbanization="",
        )
    )

    params = dict(stub.address_requests[0].url.params)
    assert params == {
        "streetAddress": "28th",
        "state": "CO",
        "secondaryAddress": "Ste 100",
        "city": "boulder",
        "ZIPCode": "80301",
        "firm": "Chipotle",
    }


def test_zip_plus4_is_never_sent() -> None:
    stub = StubUsps()
    client = stub.make_client()

    client.validate_address(
        Address(street_address="350 5th Ave", state="NY", zip_code="10118", zip_plus4="0110")
    )

    params = dict(stub.address_requests[0].url.params)
    assert "ZIPPlus4" not in params
    assert params["ZIPCode"] == "10118"


@pytest.mark.parametrize(
    ("address", "fragment"),
    [
        (None, "address is required"),
        (Address(state="CO"), "street address is required"),
        (Address(street_address="100 broadway"), "2 letter state abbreviation is required"),
        (Address(street_address="100 broadway", state="C"), "2 letter state"),
        (Address(street_address="100 broadway", state="COL"), "2 letter state"),
        (Address(street_address="100 broadway", state="CO "), "2 letter state"),
        (Address(street_address="100 broadway", state=" CO"), "2 letter state"),
    ],
)
def test_invalid_input_fails_before_any_request(address: Address | None, fragment: str) -> None:
    stub = StubUsps()
    client = stub.make_client()

    with pytest.raises(InputValidationError) as exc_info:
        client.validate_address(address)

    assert fragment in str(exc_info.value)
    assert stub.token_requests == []
    assert stub.address_requests == []


def test_missing_credentials_rejected_at_construction() -> None:
    with pytest.raises(ConfigurationError, match="ClientID is required"):
        UspsAddressClient(ClientConfig(client_secret="secret"))
    with pytest.raises(ConfigurationError, match="ClientSecret is required"):
        UspsAddressClient(ClientConfig(client_id="id"))


def test_client_defaults_endpoints() -> None:
    client = UspsAddressClient(ClientConfig(client_id="id", client_secret="secret"))

    assert client.config.server_url == PRODUCTION_SERVER_URL
    assert client.config.token_url == PRODUCTION_TOKEN_URL
    client.close()


def test_secondary_unconfirmed_correction_gets_clarifying_message(
    address_response: dict[str, Any],
) -> None:
    address_response["address"]["secondaryAddress"] = "APT 12"
    address_response["additionalInfo"]["DPVConfirmation"] = "S"
    address_response["corrections"] = [
        {"code": "32", "text": "Default address: The address you entered was found ..."}
    ]
    client = StubUsps(respond_with(200, address_response)).make_client()

    result = client.validate_address(
        Address(street_address="350 5th ave", secondary_address="apt 12", state="NY")
    )[0]

    correction = result.corrections[0]
    assert correction.code == "32"
    assert correction.text.startswith("Default address")
    assert correction.user_message == SECONDARY_NOT_CONFIRMED_MESSAGE


def test_missing_secondary_correction_keeps_usps_text(address_response: dict[str, Any]) -> None:
    text = "Default address: The address you entered was found but more information is needed"
    address_response["additionalInfo"]["DPVConfirmation"] = "D"
    address_response["corrections"] = [{"code": "32", "text": text}]
    client = StubUsps(respond_with(200, address_response)).make_client()

    result = client.validate_address(Address(street_address="350 5th ave", state="NY"))[0]

    assert result.corrections[0].user_message == text


def test_structured_401_maps_first_sub_error(error_response: dict[str, Any]) -> None:
    client = StubUsps(respond_with(401, error_response)).make_client()

    with pytest.raises(UspsApiError) as exc_info:
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    err = exc_info.value
    assert err.code == "401"
    assert err.status == "401"
    assert err.title == "Invalid access token"
    assert err.detail == "The access token has expired or is invalid."
    assert err.source is not None
    assert err.source.parameter == "Authorization"
    assert err.context["http_status"] == 401
    assert str(err) == err.detail


@pytest.mark.parametrize("status", [400, 403, 404, 429, 503])
def test_structured_error_statuses_use_top_level_message(status: int) -> None:
    payload = {"error": {"code": str(status), "message": "Request rejected"}}
    client = StubUsps(respond_with(status, payload)).make_client()

    with pytest.raises(UspsApiError) as exc_info:
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert exc_info.value.code == str(status)
    assert exc_info.value.title == "Request rejected"
    assert exc_info.value.detail == "Request rejected"
    assert exc_info.value.source is None


def test_unrecognized_status_raises_unexpected_response() -> None:
    client = StubUsps(respond_with(500, {"error": {"message": "boom"}})).make_client()

    with pytest.raises(UnexpectedResponseError) as exc_info:
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert exc_info.value.status == "500"
    assert "unexpected status code: 500" in str(exc_info.value)


def test_error_status_with_non_json_body_raises_unexpected_response() -> None:
    client = StubUsps(lambda request: httpx.Response(429, text="Too Many Requests")).make_client()

    with pytest.raises(UnexpectedResponseError, match="unexpected status code: 429"):
        client.validate_address(Address(street_address="100 broadway", state="CO"))


@pytest.mark.parametrize("body", [b"", b"null", b"  "])
def test_empty_success_body_raises_unexpected_response(body: bytes) -> None:
    client = StubUsps(lambda request: httpx.Response(200, content=body)).make_client()

    with pytest.raises(UnexpectedResponseError, match="unexpected empty response"):
        client.validate_address(Address(street_address="100 broadway", state="CO"))


def test_transport_failure_wrapped_without_retry() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    stub = StubUsps(handler)
    client = stub.make_client()

    with pytest.raises(TransportError) as exc_info:
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)
    assert "USPS API request failed" in str(exc_info.value)
    assert len(stub.address_requests) == 1


def test_token_failure_propagates_and_skips_address_call() -> None:
    address_calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/token"):
            return httpx.Response(500)
        address_calls.append(request)
        return httpx.Response(200, json={})

    config = ClientConfig(
        client_id="id",
        client_secret="secret",
        server_url="https://apis.test/addresses/v3",
        token_url="https://apis.test/oauth2/v3/token",
    )
    client = UspsAddressClient(config, transport=httpx.MockTransport(handler))

    with pytest.raises(TokenError):
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert address_calls == []


def test_custom_token_provider_is_used() -> None:
    class StaticToken:
        def get_token(self) -> str:
            return "static"

    stub = StubUsps()
    config = ClientConfig(
        client_id="id", client_secret="secret", server_url="https://apis.test/addresses/v3"
    )
    with UspsAddressClient(
        config, transport=httpx.MockTransport(stub), token_provider=StaticToken()
    ) as client:
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert stub.token_requests == []
    assert stub.address_requests[0].headers["Authorization"] == "Bearer static"


def test_debug_logging_emits_request_details(caplog: pytest.LogCaptureFixture) -> None:
    client = StubUsps().make_client(debug=True)

    with caplog.at_level(logging.DEBUG, logger="ryandata_usps"):
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    messages = [record.getMessage() for record in caplog.records]
    assert any("Calling USPS API with params" in m for m in messages)
    assert any("response status: 200" in m for m in messages)


def test_debug_logging_off_by_default(caplog: pytest.LogCaptureFixture) -> None:
    client = StubUsps().make_client()

    with caplog.at_level(logging.DEBUG, logger="ryandata_usps.remote.client"):
        client.validate_address(Address(street_address="100 broadway", state="CO"))

    assert not [r for r in caplog.records if r.name == "ryandata_usps.remote.client"]
