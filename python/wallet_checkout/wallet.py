"""
Location: python/wallet_checkout/wallet.py

Summary:
    WalletSaveCoordinator fires save-to-wallet requests and maps their
    correlated results to one of four outcomes, each with its own user
    message.

Usage:
    Create one coordinator per add-to-wallet button, then await
    save_passes() when the user clicks.

Example:
    from wallet_checkout import WalletSaveCoordinator, WalletConfig

    coordinator = WalletSaveCoordinator(client, config=WalletConfig(issuer_id="338..."))
    outcome = await coordinator.save_passes()
"""

import logging
from typing import Optional

from .control import TriggerControl
from .passes import new_loyalty_document
from .provider import LoggingNotifier, Notifier, WalletProvider
from .types import (
    UNEXPECTED_RESULT_MESSAGE,
    CommonStatusCodes,
    Messages,
    WalletConfig,
    WalletResultCodes,
    WalletSaveCancelled,
    WalletSaved,
    WalletSaveFailed,
    WalletSaveOutcome,
    WalletSaveResult,
    WalletSaveUnknown,
)

logger = logging.getLogger(__name__)


def wallet_outcome_from_result(result: WalletSaveResult) -> WalletSaveOutcome:
    """
    Map a raw save-to-wallet result code to its outcome.

    Args:
        result: The provider's result

    Returns:
        WalletSaved, WalletSaveCancelled, WalletSaveFailed or WalletSaveUnknown
    """
    if result.result_code == WalletResultCodes.RESULT_OK:
        return WalletSaved()
    if result.result_code == WalletResultCodes.RESULT_CANCELED:
        return WalletSaveCancelled()
    if result.result_code == WalletResultCodes.SAVE_ERROR:
        return WalletSaveFailed(message=result.api_error_message)
    return WalletSaveUnknown(result_code=result.result_code)


class WalletSaveCoordinator:
    """
    Coordinates a save-to-wallet request and its asynchronous result.

    Attributes:
        provider: WalletProvider used to submit documents
        notifier: Where user-facing messages go
        control: The add-to-wallet trigger control
        config: Issuer identity and correlation code
        messages: User-visible strings
    """

    def __init__(
        self,
        provider: WalletProvider,
        notifier: Optional[Notifier] = None,
        control: Optional[TriggerControl] = None,
        config: Optional[WalletConfig] = None,
        messages: Optional[Messages] = None,
    ):
        self.provider = provider
        self.notifier = notifier or LoggingNotifier()
        self.control = control or TriggerControl("add_to_google_wallet_button")
        self.config = config or WalletConfig()
        self.messages = messages or Messages()

    async def check_availability(self) -> bool:
        """
        Show the add-to-wallet trigger if the provider can save passes.

        Returns:
            The provider's answer
        """
        available = await self.provider.can_save_passes()
        if available:
            self.control.visible = True
        else:
            self.notifier.show(self.messages.wallet_unavailable)
        return available

    async def save_passes(self, document: Optional[str] = None) -> Optional[WalletSaveOutcome]:
        """
        Submit a save-to-wallet request and handle its result.

        Args:
            document: Serialized document; a new loyalty document is
                built from the config if omitted

        Returns:
            The mapped outcome, or None if the result carried another
            request's correlation code

        Raises:
            RequestInFlightError: If a save is already outstanding
        """
        if document is None:
            document = new_loyalty_document(self.config).to_json()

        with self.control.hold():
            result = await self.provider.submit_wallet_save(document, self.config.request_code)
            return self.handle_result(result)

    def handle_result(self, result: WalletSaveResult) -> Optional[WalletSaveOutcome]:
        """
        Map a result to its outcome and tell the user.

        Results for other correlation codes are ignored. For this code the
        control is re-enabled whatever the outcome.
        """
        if result.request_code != self.config.request_code:
            logger.debug(
                "Ignoring wallet result for request code %s (expected %s)",
                result.request_code,
                self.config.request_code,
            )
            return None

        outcome = wallet_outcome_from_result(result)

        if isinstance(outcome, WalletSaved):
            self.notifier.show(self.messages.wallet_saved)
        elif isinstance(outcome, WalletSaveCancelled):
            self.notifier.show(self.messages.wallet_canceled)
        elif isinstance(outcome, WalletSaveFailed):
            self.notifier.show(self.messages.wallet_save_failed)
            self.report_error(result.result_code, outcome.message)
        else:
            self.notifier.show(self.messages.something_went_wrong)
            self.report_error(CommonStatusCodes.INTERNAL_ERROR, UNEXPECTED_RESULT_MESSAGE)

        self.control.release()
        return outcome

    def report_error(self, status_code: int, message: Optional[str]) -> None:
        """Record a wallet provider error; the user has already been shown a message."""
        logger.error("Google Wallet API error: Error code: %s, Message: %s", status_code, message)
