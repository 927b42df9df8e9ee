"""
Tests for wallet_checkout.client module.

Tests the PayClient class with mock-based testing for HTTP requests.
"""

import json

import httpx
import pytest
from unittest.mock import MagicMock, patch

from wallet_checkout.client import PayClient
from wallet_checkout.provider import PaymentProvider, WalletProvider
from wallet_checkout.types import (
    CheckoutConfig,
    CommonStatusCodes,
    PaymentRecoverableError,
    PaymentRequest,
    PaymentSuccess,
    PaymentTerminalError,
    WalletResultCodes,
)


@pytest.fixture
def client():
    """Create a client for testing."""
    return PayClient(base_url="https://pay.example.com/")


def _json_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.raise_for_status = MagicMock()
    return response


class TestPayClientInit:
    """Tests for PayClient initialization."""

    def test_basic_init(self, client):
        assert client.base_url == "https://pay.example.com"
        assert client.timeout == 60.0
        assert client.default_headers == {}
        assert isinstance(client.config, CheckoutConfig)

    def test_implements_provider_protocols(self, client):
        assert isinstance(client, PaymentProvider)
        assert isinstance(client, WalletProvider)

    async def test_async_context_manager(self):
        async with PayClient(base_url="https://pay.example.com") as client:
            assert client is not None


class TestIsReadyToPay:
    """Tests for PayClient.is_ready_to_pay."""

    async def test_ready(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = _json_response(200, {"result": True})

            assert await client.is_ready_to_pay() is True

            call_args = mock_request.call_args
            assert call_args[0] == ("POST", "https://pay.example.com/isReadyToPay")
            assert call_args[1]["json"]["apiVersion"] == 2

    async def test_not_ready(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = _json_response(200, {"result": False})

            assert await client.is_ready_to_pay() is False

    async def test_non_json_body_is_not_ready(self, client):
        with patch.object(client._http, "request") as mock_request:
            response = _json_response(200, None)
            response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>ok</html>", 0)
            mock_request.return_value = response

            assert await client.is_ready_to_pay() is False

    @pytest.mark.parametrize("body", [[True], "true", {"result": "true"}])
    async def test_non_object_or_non_bool_result_is_not_ready(self, client, body):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = _json_response(200, body)

            assert await client.is_ready_to_pay() is False

    async def test_transport_error_is_not_ready(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.side_effect = httpx.ConnectError("refused")

            assert await client.is_ready_to_pay() is False


class TestSubmitPayment:
    """Tests for PayClient.submit_payment."""

    async def test_success(self, client, payment_payload):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(200, text=payment_payload)

            outcome = await client.submit_payment(PaymentRequest(amount_units=1000))

            assert outcome == PaymentSuccess(payload=payment_payload)
            call_args = mock_request.call_args
            assert call_args[0] == ("POST", "https://pay.example.com/loadPaymentData")
            assert call_args[1]["json"]["transactionInfo"]["totalPrice"] == "10.00"

    async def test_recoverable(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(
                409, json={"statusCode": 6, "resolution": "pending-intent"}
            )

            outcome = await client.submit_payment(PaymentRequest(amount_units=1000))

            assert isinstance(outcome, PaymentRecoverableError)
            assert outcome.resolution == "pending-intent"

    async def test_terminal(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(
                400, json={"statusCode": 10, "statusMessage": "Developer error"}
            )

            outcome = await client.submit_payment(PaymentRequest(amount_units=1000))

            assert outcome == PaymentTerminalError(status_code=10, message="Developer error")

    async def test_transport_error_is_internal_error(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.side_effect = httpx.ReadTimeout("timed out")

            outcome = await client.submit_payment(PaymentRequest(amount_units=1000))

            assert isinstance(outcome, PaymentTerminalError)
            assert outcome.status_code == CommonStatusCodes.INTERNAL_ERROR

    async def test_non_int_status_code_is_terminal(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(400, json={"statusCode": "DEVELOPER_ERROR"})

            outcome = await client.submit_payment(PaymentRequest(amount_units=1000))

            assert outcome == PaymentTerminalError(status_code=400, message="Bad Request")

    async def test_default_headers_sent(self, payment_payload):
        client = PayClient(
            base_url="https://pay.example.com",
            headers={"Authorization": "Bearer token123"},
        )
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(200, text=payment_payload)

            await client.submit_payment(PaymentRequest(amount_units=1))

            assert mock_request.call_args[1]["headers"]["Authorization"] == "Bearer token123"


class TestWalletEndpoints:
    """Tests for PayClient.can_save_passes and submit_wallet_save."""

    async def test_can_save_passes(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = _json_response(200, {"result": True})

            assert await client.can_save_passes() is True
            assert mock_request.call_args[0] == ("GET", "https://pay.example.com/canSavePasses")

    async def test_non_json_body_cannot_save(self, client):
        with patch.object(client._http, "request") as mock_request:
            response = _json_response(200, None)
            response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>ok</html>", 0)
            mock_request.return_value = response

            assert await client.can_save_passes() is False

    async def test_list_body_cannot_save(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = _json_response(200, [{"result": True}])

            assert await client.can_save_passes() is False

    async def test_save_posts_document_verbatim(self, client):
        document = json.dumps({"typ": "savetowallet"})
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(200)

            result = await client.submit_wallet_save(document, 1000)

            assert result.request_code == 1000
            assert result.result_code == WalletResultCodes.RESULT_OK
            call_args = mock_request.call_args
            assert call_args[0] == ("POST", "https://pay.example.com/savePasses")
            assert call_args[1]["content"] == document
            assert call_args[1]["headers"]["Content-Type"] == "application/json"

    async def test_save_error(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(
                400, json={"resultCode": WalletResultCodes.SAVE_ERROR, "apiErrorMessage": "bad class"}
            )

            result = await client.submit_wallet_save("{}", 1000)

            assert result.result_code == WalletResultCodes.SAVE_ERROR
            assert result.api_error_message == "bad class"

    async def test_save_null_result_code(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.return_value = httpx.Response(500, json={"resultCode": None})

            result = await client.submit_wallet_save("{}", 1000)

            assert result.request_code == 1000
            assert result.result_code == WalletResultCodes.SAVE_ERROR

    async def test_save_transport_error(self, client):
        with patch.object(client._http, "request") as mock_request:
            mock_request.side_effect = httpx.ConnectError("refused")

            result = await client.submit_wallet_save("{}", 1000)

            assert result.result_code == WalletResultCodes.SAVE_ERROR
            assert result.api_error_message == "ConnectError: refused"
