"""
Location: python/wallet_checkout/provider.py

Summary:
    Defines the capability protocols the coordinators depend on: the
    payment provider, the wallet provider, the user-facing resolution
    flow and the notifier that shows messages. Also defines the SDK
    exceptions.

Usage:
    Used by checkout.py and wallet.py. Implement these protocols to plug
    in a real vendor client (see client.PayClient) or a test double that
    yields each outcome deterministically.

Example:
    from wallet_checkout.provider import PaymentProvider
    from wallet_checkout.types import PaymentSuccess

    class ApprovingProvider:
        async def is_ready_to_pay(self) -> bool:
            return True

        async def submit_payment(self, request):
            return PaymentSuccess(payload=approved_json)
"""

import logging
from typing import Any, Protocol, runtime_checkable

from .types import PaymentOutcome, PaymentRequest, ResolutionResult, WalletSaveResult

logger = logging.getLogger(__name__)


@runtime_checkable
class PaymentProvider(Protocol):
    """
    Protocol for submitting payments to an external provider.

    Provider errors are returned as outcome values, not raised.
    """

    async def is_ready_to_pay(self) -> bool:
        """
        Ask the provider whether payments can be made from this client.

        Returns:
            True if the payment button should be offered
        """
        ...

    async def submit_payment(self, request: PaymentRequest) -> PaymentOutcome:
        """
        Submit a payment request.

        Args:
            request: The payment request to fulfill

        Returns:
            PaymentSuccess, PaymentRecoverableError or PaymentTerminalError
        """
        ...


@runtime_checkable
class WalletProvider(Protocol):
    """Protocol for saving passes to the user's wallet."""

    async def can_save_passes(self) -> bool:
        """
        Ask the provider whether passes can be saved from this client.

        Returns:
            True if the add-to-wallet button should be offered
        """
        ...

    async def submit_wallet_save(self, document: str, request_code: int) -> WalletSaveResult:
        """
        Submit a save-to-wallet request.

        Args:
            document: Serialized save-to-wallet JSON document
            request_code: Correlation code echoed back in the result

        Returns:
            WalletSaveResult carrying the result code
        """
        ...


@runtime_checkable
class ResolutionFlow(Protocol):
    """
    A one-shot, user-facing step that resolves a recoverable payment error.

    The handle comes from PaymentRecoverableError.resolution and is opaque
    to the SDK.
    """

    async def launch(self, resolution: Any) -> ResolutionResult:
        ...


@runtime_checkable
class Notifier(Protocol):
    """Shows a short message to the user."""

    def show(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Notifier that writes user messages to the log. Used when no UI is attached."""

    def show(self, message: str) -> None:
        logger.info("%s", message)


class CheckoutError(Exception):
    """Base exception for wallet-checkout."""
    pass


class RequestInFlightError(CheckoutError):
    """Exception raised when a request is issued while another is outstanding."""
    pass


class WalletDocumentError(CheckoutError):
    """Exception raised when a save-to-wallet document is invalid."""
    pass
