"""
Shared pytest fixtures for wallet-checkout tests.

This module provides common fixtures used across all test files,
including sample payment payloads and provider test doubles.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from wallet_checkout.types import (
    PaymentSuccess,
    ResolutionCancelled,
    WalletResultCodes,
    WalletSaveResult,
)


class RecordingNotifier:
    """Notifier double that keeps every message shown."""

    def __init__(self):
        self.messages: list[str] = []

    def show(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def payment_data():
    """Approved payment data with billing address and token."""
    return {
        "apiVersion": 2,
        "apiVersionMinor": 0,
        "paymentMethodData": {
            "type": "CARD",
            "description": "Visa •••• 1234",
            "info": {
                "cardNetwork": "VISA",
                "cardDetails": "1234",
                "billingAddress": {
                    "name": "Jane Doe",
                    "postalCode": "94043",
                    "countryCode": "US",
                },
            },
            "tokenizationData": {
                "type": "PAYMENT_GATEWAY",
                "token": "tok_abc",
            },
        },
    }


@pytest.fixture
def payment_payload(payment_data):
    """payment_data serialized the way the provider returns it."""
    return json.dumps(payment_data)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def mock_payment_provider(payment_payload):
    """Create a mock payment provider that approves every payment."""
    provider = MagicMock()
    provider.is_ready_to_pay = AsyncMock(return_value=True)
    provider.submit_payment = AsyncMock(return_value=PaymentSuccess(payload=payment_payload))
    return provider


@pytest.fixture
def mock_resolution_flow():
    """Create a mock resolution flow that the user cancels."""
    flow = MagicMock()
    flow.launch = AsyncMock(return_value=ResolutionCancelled())
    return flow


@pytest.fixture
def mock_wallet_provider():
    """Create a mock wallet provider that saves every pass."""
    provider = MagicMock()
    provider.can_save_passes = AsyncMock(return_value=True)
    provider.submit_wallet_save = AsyncMock(
        side_effect=lambda document, request_code: WalletSaveResult(
            request_code=request_code,
            result_code=WalletResultCodes.RESULT_OK,
        )
    )
    return provider
