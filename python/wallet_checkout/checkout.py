"""
Location: python/wallet_checkout/checkout.py

Summary:
    PaymentCoordinator drives one payment attempt: it submits the request
    to the provider, routes recoverable errors through the resolution
    flow, extracts billing details from a successful payload and logs
    provider errors.

Usage:
    Create one coordinator per payment button, then await
    request_payment() when the user clicks.

Example:
    from wallet_checkout import PaymentCoordinator, PayClient

    async with PayClient(base_url="https://pay.example.com") as client:
        coordinator = PaymentCoordinator(client, resolution_flow=my_dialog)
        if await coordinator.check_availability():
            info = await coordinator.request_payment(1000)
"""

import json
import logging
from typing import Optional

from .control import TriggerControl
from .provider import LoggingNotifier, Notifier, PaymentProvider, ResolutionFlow
from .types import (
    UNEXPECTED_RESULT_MESSAGE,
    BillingInfo,
    CheckoutConfig,
    CommonStatusCodes,
    Messages,
    PaymentRecoverableError,
    PaymentRequest,
    PaymentSuccess,
    PaymentTerminalError,
    ResolutionConfirmed,
    ResolutionResult,
)

logger = logging.getLogger(__name__)


class PaymentCoordinator:
    """
    Coordinates a payment request and its asynchronous result.

    Only one request may be outstanding at a time; the trigger control is
    disabled while it is in flight and re-enabled after any outcome.

    Attributes:
        provider: PaymentProvider used to submit requests
        resolution_flow: Flow launched for recoverable errors
        notifier: Where user-facing messages go
        control: The payment trigger control
        config: Merchant and transaction context
        messages: User-visible strings
    """

    def __init__(
        self,
        provider: PaymentProvider,
        resolution_flow: ResolutionFlow,
        notifier: Optional[Notifier] = None,
        control: Optional[TriggerControl] = None,
        config: Optional[CheckoutConfig] = None,
        messages: Optional[Messages] = None,
    ):
        self.provider = provider
        self.resolution_flow = resolution_flow
        self.notifier = notifier or LoggingNotifier()
        self.control = control or TriggerControl("google_pay_button")
        self.config = config or CheckoutConfig()
        self.messages = messages or Messages()

    async def check_availability(self) -> bool:
        """
        Show the payment trigger if the provider can take payments.

        When the provider is not available the user is told so and the
        trigger stays hidden.

        Returns:
            The provider's readiness answer
        """
        available = await self.provider.is_ready_to_pay()
        if available:
            self.control.visible = True
        else:
            self.notifier.show(self.messages.google_pay_unavailable)
        return available

    async def request_payment(self, amount_units: int) -> Optional[BillingInfo]:
        """
        Submit a payment for `amount_units` and handle its outcome.

        The amount must already include taxes and shipping; the provider
        takes a single total. An exception from the provider or the
        resolution flow, or an outcome of no known kind, is reported as
        INTERNAL_ERROR and ends the attempt without reaching the caller.

        Args:
            amount_units: Total in minor currency units

        Returns:
            BillingInfo if the payment (directly or after resolution)
            succeeded and its payload was readable, otherwise None

        Raises:
            RequestInFlightError: If a payment is already outstanding
        """
        request = PaymentRequest.for_amount(amount_units, self.config)

        with self.control.hold():
            try:
                outcome = await self.provider.submit_payment(request)

                if isinstance(outcome, PaymentSuccess):
                    return self.handle_success(outcome.payload)

                if isinstance(outcome, PaymentRecoverableError):
                    result = await self.resolution_flow.launch(outcome.resolution)
                    return self.handle_resolution_result(result)

                if isinstance(outcome, PaymentTerminalError):
                    self.report_error(outcome.status_code, outcome.message)
                    return None

                logger.debug("Unknown payment outcome: %r", outcome)
            except Exception:
                logger.warning("Payment attempt raised", exc_info=True)

            self.report_error(CommonStatusCodes.INTERNAL_ERROR, UNEXPECTED_RESULT_MESSAGE)
            return None

    def handle_resolution_result(self, result: ResolutionResult) -> Optional[BillingInfo]:
        """
        Handle the result of the resolution flow.

        A confirmed resolution carries a payment payload and is handled
        like a direct success. A cancelled one abandons this attempt.
        """
        if isinstance(result, ResolutionConfirmed):
            return self.handle_success(result.payload)

        logger.debug("Payment resolution cancelled by the user")
        return None

    def handle_success(self, payload: str) -> Optional[BillingInfo]:
        """
        Read billing details from an approved payment payload.

        Shows the billing name to the user and logs the payment token.
        A malformed payload or a missing field is logged and swallowed.

        Args:
            payload: JSON document returned by the provider

        Returns:
            BillingInfo, or None if the payload could not be read
        """
        try:
            payment_method_data = json.loads(payload)["paymentMethodData"]
            billing_name = payment_method_data["info"]["billingAddress"]["name"]
            if not isinstance(billing_name, str):
                raise TypeError(f"billing name is {type(billing_name).__name__}, not str")
            logger.debug("Billing name: %s", billing_name)

            self.notifier.show(self.messages.payments_show_name.format(name=billing_name))

            token = payment_method_data["tokenizationData"]["token"]
            if not isinstance(token, str):
                raise TypeError(f"token is {type(token).__name__}, not str")
            logger.debug("Payment token: %s", token)
        except (ValueError, KeyError, TypeError) as error:
            logger.error("handle_success: could not read payment data: %r", error)
            return None

        return BillingInfo(billing_name=billing_name, token=token)

    def report_error(self, status_code: int, message: Optional[str]) -> None:
        """
        Record a provider error.

        By now the provider has shown its own error dialog, so only a log
        entry is written.

        Args:
            status_code: Provider status code
            message: Optional provider message
        """
        logger.error("Google Pay API error: Error code: %s, Message: %s", status_code, message)
