"""
Location: python/wallet_checkout/client.py

Summary:
    PayClient is an httpx-backed implementation of both the PaymentProvider
    and WalletProvider protocols. It posts the provider request documents
    and converts the responses to outcome values.

Usage:
    Pass a PayClient to PaymentCoordinator and WalletSaveCoordinator.
    Close it when done, or use it as an async context manager.

Example:
    from wallet_checkout import PayClient, PaymentCoordinator

    async with PayClient(base_url="https://pay.example.com") as client:
        coordinator = PaymentCoordinator(client, resolution_flow=my_dialog)
        await coordinator.request_payment(1000)
"""

import logging
from typing import Optional

import httpx

from .types import (
    CheckoutConfig,
    PaymentOutcome,
    PaymentRequest,
    WalletResultCodes,
    WalletSaveResult,
)
from .transport import (
    PAY_ENDPOINTS,
    build_is_ready_to_pay_request,
    build_payment_data_request,
    json_body,
    parse_payment_response,
    parse_save_response,
    transport_failure,
)

logger = logging.getLogger(__name__)


class PayClient:
    """
    HTTP client for a Google Pay style payment and wallet provider.

    Transport failures are not raised: they become a terminal payment
    error or a SAVE_ERROR wallet result, so the coordinators always see
    an outcome.

    Attributes:
        base_url: Provider base URL
        config: Merchant configuration used to build request documents
        timeout: Request timeout in seconds
        default_headers: Headers sent with every request
    """

    def __init__(
        self,
        base_url: str,
        config: Optional[CheckoutConfig] = None,
        timeout: float = 60.0,
        headers: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the PayClient.

        Args:
            base_url: Provider base URL (trailing slash removed)
            config: Optional CheckoutConfig (defaults used if omitted)
            timeout: Request timeout in seconds (default 60)
            headers: Optional default headers for all requests
        """
        self.base_url = base_url.rstrip("/")
        self.config = config or CheckoutConfig()
        self.timeout = timeout
        self.default_headers = headers or {}

        self._http = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._http.aclose()

    async def __aenter__(self) -> "PayClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def is_ready_to_pay(self) -> bool:
        """
        Ask the provider whether this client can pay.

        Returns:
            The provider's `result`; False if the provider could not be reached
            or did not answer with a JSON `true`
        """
        try:
            response = await self._http.request(
                "POST",
                self._url("IS_READY_TO_PAY"),
                json=build_is_ready_to_pay_request(self.config),
                headers=self.default_headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("isReadyToPay failed: %s", e)
            return False
        return json_body(response).get("result") is True

    async def submit_payment(self, request: PaymentRequest) -> PaymentOutcome:
        """
        Post a PaymentDataRequest for `request`.

        Args:
            request: The payment request

        Returns:
            The outcome parsed from the provider response
        """
        try:
            response = await self._http.request(
                "POST",
                self._url("LOAD_PAYMENT_DATA"),
                json=build_payment_data_request(request, self.config),
                headers=self.default_headers,
            )
        except httpx.HTTPError as e:
            return transport_failure(e)
        return parse_payment_response(response)

    async def can_save_passes(self) -> bool:
        """
        Ask the provider whether this client can save passes.

        Returns:
            The provider's `result`; False if the provider could not be reached
            or did not answer with a JSON `true`
        """
        try:
            response = await self._http.request(
                "GET",
                self._url("CAN_SAVE_PASSES"),
                headers=self.default_headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("canSavePasses failed: %s", e)
            return False
        return json_body(response).get("result") is True

    async def submit_wallet_save(self, document: str, request_code: int) -> WalletSaveResult:
        """
        Post a serialized save-to-wallet document.

        Args:
            document: The document JSON text
            request_code: Correlation code echoed back in the result

        Returns:
            WalletSaveResult for `request_code`
        """
        headers = {**self.default_headers, "Content-Type": "application/json"}
        try:
            response = await self._http.request(
                "POST",
                self._url("SAVE_PASSES"),
                content=document,
                headers=headers,
            )
        except httpx.HTTPError as e:
            return WalletSaveResult(
                request_code=request_code,
                result_code=WalletResultCodes.SAVE_ERROR,
                api_error_message=f"{type(e).__name__}: {e}",
            )
        return parse_save_response(response, request_code)

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{PAY_ENDPOINTS[endpoint]}"


__all__ = ["PayClient"]
