"""
Location: python/wallet_checkout/__init__.py

Summary:
    Main package initialization for wallet-checkout. Exports all public
    classes and functions for convenient importing.

Usage:
    from wallet_checkout import PaymentCoordinator, WalletSaveCoordinator, PayClient

    # Or import specific modules
    from wallet_checkout.passes import new_loyalty_document
    from wallet_checkout.transport import build_payment_data_request

Version: 0.1.0
"""

from .checkout import PaymentCoordinator
from .wallet import WalletSaveCoordinator, wallet_outcome_from_result
from .client import PayClient
from .control import TriggerControl
from .types import (
    BillingInfo,
    CheckoutConfig,
    CommonStatusCodes,
    Messages,
    PaymentOutcome,
    PaymentRecoverableError,
    PaymentRequest,
    PaymentSuccess,
    PaymentTerminalError,
    ResolutionCancelled,
    ResolutionConfirmed,
    ResolutionResult,
    WalletConfig,
    WalletResultCodes,
    WalletSaveCancelled,
    WalletSaved,
    WalletSaveFailed,
    WalletSaveOutcome,
    WalletSaveResult,
    WalletSaveUnknown,
)
from .provider import (
    PaymentProvider,
    WalletProvider,
    ResolutionFlow,
    Notifier,
    LoggingNotifier,
    CheckoutError,
    RequestInFlightError,
    WalletDocumentError,
)
from .passes import SaveToWalletDocument, new_loyalty_document, parse_wallet_document

__version__ = "0.1.0"

__all__ = [
    # Coordinators
    "PaymentCoordinator",
    "WalletSaveCoordinator",
    "wallet_outcome_from_result",
    "TriggerControl",
    # HTTP provider
    "PayClient",
    # Types
    "BillingInfo",
    "CheckoutConfig",
    "CommonStatusCodes",
    "Messages",
    "PaymentOutcome",
    "PaymentRecoverableError",
    "PaymentRequest",
    "PaymentSuccess",
    "PaymentTerminalError",
    "ResolutionCancelled",
    "ResolutionConfirmed",
    "ResolutionResult",
    "WalletConfig",
    "WalletResultCodes",
    "WalletSaveCancelled",
    "WalletSaved",
    "WalletSaveFailed",
    "WalletSaveOutcome",
    "WalletSaveResult",
    "WalletSaveUnknown",
    # Capability protocols
    "PaymentProvider",
    "WalletProvider",
    "ResolutionFlow",
    "Notifier",
    "LoggingNotifier",
    # Exceptions
    "CheckoutError",
    "RequestInFlightError",
    "WalletDocumentError",
    # Wallet documents
    "SaveToWalletDocument",
    "new_loyalty_document",
    "parse_wallet_document",
]
