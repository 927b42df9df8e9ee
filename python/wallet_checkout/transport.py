"""
Location: python/wallet_checkout/transport.py

Summary:
    Wire format for the Google Pay style payment provider. Builds the
    IsReadyToPayRequest and PaymentDataRequest documents and turns
    provider HTTP responses into outcome values.

Usage:
    Used by client.py. The builders are also useful on their own when a
    request has to be handed to a platform SDK instead.

Example:
    from wallet_checkout.transport import build_payment_data_request

    body = build_payment_data_request(PaymentRequest(amount_units=1000), CheckoutConfig())
    assert body["transactionInfo"]["totalPrice"] == "10.00"
"""

from decimal import Decimal
from typing import Optional

import httpx

from .types import (
    CheckoutConfig,
    CommonStatusCodes,
    PaymentOutcome,
    PaymentRecoverableError,
    PaymentRequest,
    PaymentSuccess,
    PaymentTerminalError,
    WalletResultCodes,
    WalletSaveResult,
)


# Provider endpoint paths
PAY_ENDPOINTS = {
    "IS_READY_TO_PAY": "/isReadyToPay",
    "LOAD_PAYMENT_DATA": "/loadPaymentData",
    "CAN_SAVE_PASSES": "/canSavePasses",
    "SAVE_PASSES": "/savePasses",
}

API_VERSION = 2
API_VERSION_MINOR = 0

# ISO 4217 currencies without a minor unit
ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "VND", "CLP", "ISK", "UGX", "XAF", "XOF"}

# ISO 4217 currencies with three minor digits
THREE_DECIMAL_CURRENCIES = {"BHD", "IQD", "JOD", "KWD", "LYD", "OMR", "TND"}


def _base_card_payment_method(config: CheckoutConfig) -> dict:
    return {
        "type": "CARD",
        "parameters": {
            "allowedAuthMethods": list(config.allowed_auth_methods),
            "allowedCardNetworks": list(config.allowed_card_networks),
            "billingAddressRequired": True,
            "billingAddressParameters": {"format": "FULL"},
        },
    }


def _card_payment_method(config: CheckoutConfig) -> dict:
    method = _base_card_payment_method(config)
    method["tokenizationSpecification"] = {
        "type": "PAYMENT_GATEWAY",
        "parameters": {
            "gateway": config.gateway,
            "gatewayMerchantId": config.gateway_merchant_id,
        },
    }
    return method


def format_total_price(amount_units: int, currency_code: str) -> str:
    """
    Render an amount in minor units as the provider's decimal price string.

    Args:
        amount_units: Amount in minor units
        currency_code: ISO 4217 currency

    Returns:
        e.g. "10.00" for 1000 USD cents, "1000" for 1000 JPY,
        "1.000" for 1000 BHD fils
    """
    currency = currency_code.upper()
    if currency in ZERO_DECIMAL_CURRENCIES:
        return str(amount_units)
    exponent = 3 if currency in THREE_DECIMAL_CURRENCIES else 2
    return str(Decimal(amount_units).scaleb(-exponent).quantize(Decimal(1).scaleb(-exponent)))


def build_is_ready_to_pay_request(config: CheckoutConfig) -> dict:
    """Build the IsReadyToPayRequest document."""
    return {
        "apiVersion": API_VERSION,
        "apiVersionMinor": API_VERSION_MINOR,
        "allowedPaymentMethods": [_base_card_payment_method(config)],
    }


def build_payment_data_request(request: PaymentRequest, config: CheckoutConfig) -> dict:
    """
    Build the PaymentDataRequest document for a payment.

    The total price is final and already includes shipping.

    Args:
        request: The payment request
        config: Merchant configuration

    Returns:
        PaymentDataRequest as a dict
    """
    return {
        "apiVersion": API_VERSION,
        "apiVersionMinor": API_VERSION_MINOR,
        "allowedPaymentMethods": [_card_payment_method(config)],
        "transactionInfo": {
            "totalPrice": format_total_price(request.amount_units, request.currency_code),
            "totalPriceStatus": "FINAL",
            "countryCode": request.country_code,
            "currencyCode": request.currency_code,
        },
        "merchantInfo": {"merchantName": config.merchant_name},
        "shippingAddressRequired": True,
    }


def json_body(response: httpx.Response) -> dict:
    """Decode a JSON object body; anything else reads as an empty dict."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _int_field(body: dict, key: str, default: int) -> int:
    value = body.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def _str_field(body: dict, key: str) -> Optional[str]:
    value = body.get(key)
    return value if isinstance(value, str) and value else None


def parse_payment_response(response: httpx.Response) -> PaymentOutcome:
    """
    Convert a loadPaymentData response into a payment outcome.

    A 2xx response is a success whose body is the payment data. An error
    body carrying a `resolution` is recoverable; any other error is
    terminal, with the body's integer `statusCode` if present, else the HTTP
    status. Fields of the wrong type are ignored rather than raised.

    Args:
        response: The provider response

    Returns:
        PaymentSuccess, PaymentRecoverableError or PaymentTerminalError
    """
    if response.is_success:
        return PaymentSuccess(payload=response.text)

    body = json_body(response)
    status_code = _int_field(body, "statusCode", response.status_code)
    if body.get("resolution") is not None:
        return PaymentRecoverableError(resolution=body["resolution"], status_code=status_code)

    return PaymentTerminalError(
        status_code=status_code,
        message=_str_field(body, "statusMessage") or response.reason_phrase or None,
    )


def parse_save_response(response: httpx.Response, request_code: int) -> WalletSaveResult:
    """
    Convert a savePasses response into a wallet save result.

    A 2xx response without a body is treated as RESULT_OK; an error
    response without an integer result code is a SAVE_ERROR.

    Args:
        response: The provider response
        request_code: Correlation code of the request

    Returns:
        WalletSaveResult echoing `request_code`
    """
    body = json_body(response)
    default_code = WalletResultCodes.RESULT_OK if response.is_success else WalletResultCodes.SAVE_ERROR
    return WalletSaveResult(
        request_code=request_code,
        result_code=_int_field(body, "resultCode", default_code),
        api_error_message=_str_field(body, "apiErrorMessage"),
    )


def transport_failure(error: Exception) -> PaymentTerminalError:
    """Outcome for a request that never got a provider response."""
    return PaymentTerminalError(
        status_code=CommonStatusCodes.INTERNAL_ERROR,
        message=f"{type(error).__name__}: {error}",
    )
