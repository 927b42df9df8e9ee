"""
Location: python/wallet_checkout/types.py

Summary:
    Pydantic models for wallet-checkout. Defines the payment request, the
    tagged outcome variants returned by payment and wallet providers, the
    billing projection of a successful payment, and the configuration
    objects passed to the coordinators.

Usage:
    These models are imported by checkout.py, wallet.py, transport.py and
    client.py. Amounts are integers in the smallest currency unit.

Example:
    from wallet_checkout.types import CheckoutConfig, PaymentRequest

    config = CheckoutConfig(currency_code="EUR", country_code="DE")
    request = PaymentRequest.for_amount(config.total_price_units, config)
"""

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field


class CommonStatusCodes:
    """Provider status codes the SDK produces itself."""
    INTERNAL_ERROR = 8


UNEXPECTED_RESULT_MESSAGE = (
    "Unexpected non API exception when trying to deliver the task result to an activity!"
)


class WalletResultCodes:
    """
    Result codes delivered with a save-to-wallet callback.

    RESULT_OK and RESULT_CANCELED follow the platform activity result
    convention; SAVE_ERROR is the provider's own failure signal.
    """
    RESULT_OK = -1
    RESULT_CANCELED = 0
    SAVE_ERROR = 1


class CheckoutConfig(BaseModel):
    """
    Merchant and transaction context for payment requests.

    Attributes:
        currency_code: ISO 4217 currency for every request
        country_code: ISO 3166 country of the merchant
        merchant_name: Name shown on the provider payment sheet
        gateway: Tokenization gateway identifier
        gateway_merchant_id: Merchant id registered with the gateway
        allowed_card_networks: Card networks accepted at checkout
        allowed_auth_methods: Card authentication methods accepted
        item_price_units: Price of the demo item in minor units
        shipping_cost_units: Shipping cost in minor units
    """
    currency_code: str = Field("USD", alias="currencyCode")
    country_code: str = Field("US", alias="countryCode")
    merchant_name: str = Field("Example Merchant", alias="merchantName")
    gateway: str = "example"
    gateway_merchant_id: str = Field("exampleGatewayMerchantId", alias="gatewayMerchantId")
    allowed_card_networks: list[str] = Field(
        default_factory=lambda: ["AMEX", "DISCOVER", "JCB", "MASTERCARD", "VISA"],
        alias="allowedCardNetworks",
    )
    allowed_auth_methods: list[str] = Field(
        default_factory=lambda: ["PAN_ONLY", "CRYPTOGRAM_3DS"],
        alias="allowedAuthMethods",
    )
    item_price_units: int = Field(100, ge=0, alias="itemPriceUnits")
    shipping_cost_units: int = Field(900, ge=0, alias="shippingCostUnits")

    model_config = {"populate_by_name": True}

    @property
    def total_price_units(self) -> int:
        """Item price plus shipping; the provider API takes one amount."""
        return self.item_price_units + self.shipping_cost_units


class WalletConfig(BaseModel):
    """
    Issuer identity and correlation settings for save-to-wallet requests.

    Attributes:
        issuer_email: Service account email used as the document issuer
        issuer_id: Wallet issuer id; prefixes every object and class id
        class_suffix: Unique part of the loyalty class id
        request_code: Correlation code matching results to requests
        origins: Web origins allowed to save the document
    """
    issuer_email: str = Field("issuer@example.com", alias="issuerEmail")
    issuer_id: str = Field("3388000000022209204", alias="issuerId")
    class_suffix: str = Field("6abee19a-f801-4bd1-909d-ce461964820d", alias="classSuffix")
    request_code: int = Field(1000, alias="requestCode")
    origins: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @property
    def class_id(self) -> str:
        return f"{self.issuer_id}.{self.class_suffix}"


class Messages(BaseModel):
    """User-visible strings. `payments_show_name` takes a `{name}` field."""
    payments_show_name: str = "Payment success! Billing name: {name}"
    google_pay_unavailable: str = "Unfortunately, Google Pay is not available on this device"
    wallet_unavailable: str = "Unfortunately, Google Wallet is not available on this device"
    wallet_saved: str = "Pass added to Google Wallet"
    wallet_canceled: str = "Saving the pass was cancelled"
    wallet_save_failed: str = "The pass could not be added to Google Wallet"
    something_went_wrong: str = "Something went wrong, please try again"


class PaymentRequest(BaseModel):
    """
    A single payment request. Built fresh for every attempt.

    Attributes:
        amount_units: Total in minor units, inclusive of fees and shipping
        currency_code: ISO 4217 currency
        country_code: ISO 3166 country
    """
    amount_units: int = Field(ge=0, alias="amountUnits")
    currency_code: str = Field("USD", alias="currencyCode")
    country_code: str = Field("US", alias="countryCode")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def for_amount(cls, amount_units: int, config: CheckoutConfig) -> "PaymentRequest":
        return cls(
            amount_units=amount_units,
            currency_code=config.currency_code,
            country_code=config.country_code,
        )


class PaymentSuccess(BaseModel):
    """The provider approved the payment; `payload` is its JSON document."""
    kind: Literal["success"] = "success"
    payload: str


class PaymentRecoverableError(BaseModel):
    """
    The provider needs the user to resolve something before it can continue.

    Attributes:
        resolution: Opaque handle passed unchanged to the resolution flow
        status_code: Provider status code, if one was given
    """
    kind: Literal["recoverable"] = "recoverable"
    resolution: Any
    status_code: Optional[int] = Field(None, alias="statusCode")

    model_config = {"populate_by_name": True}


class PaymentTerminalError(BaseModel):
    """The provider failed the request with no local resolution step."""
    kind: Literal["terminal"] = "terminal"
    status_code: int = Field(alias="statusCode")
    message: Optional[str] = None

    model_config = {"populate_by_name": True}


PaymentOutcome = Annotated[
    Union[PaymentSuccess, PaymentRecoverableError, PaymentTerminalError],
    Field(discriminator="kind"),
]


class ResolutionConfirmed(BaseModel):
    """The user completed the resolution flow; carries the payment payload."""
    kind: Literal["confirmed"] = "confirmed"
    payload: str


class ResolutionCancelled(BaseModel):
    """The user backed out of the resolution flow."""
    kind: Literal["cancelled"] = "cancelled"


ResolutionResult = Annotated[
    Union[ResolutionConfirmed, ResolutionCancelled],
    Field(discriminator="kind"),
]


class WalletSaveResult(BaseModel):
    """
    Raw result of a save-to-wallet request as delivered by the provider.

    Attributes:
        request_code: Correlation code the request was issued with
        result_code: One of WalletResultCodes, or anything else
        api_error_message: Error text embedded with a SAVE_ERROR result
    """
    request_code: int = Field(alias="requestCode")
    result_code: int = Field(alias="resultCode")
    api_error_message: Optional[str] = Field(None, alias="apiErrorMessage")

    model_config = {"populate_by_name": True}


class WalletSaved(BaseModel):
    kind: Literal["saved"] = "saved"


class WalletSaveCancelled(BaseModel):
    kind: Literal["cancelled"] = "cancelled"


class WalletSaveFailed(BaseModel):
    kind: Literal["failed"] = "failed"
    message: Optional[str] = None


class WalletSaveUnknown(BaseModel):
    kind: Literal["unknown"] = "unknown"
    result_code: Optional[int] = Field(None, alias="resultCode")

    model_config = {"populate_by_name": True}


WalletSaveOutcome = Annotated[
    Union[WalletSaved, WalletSaveCancelled, WalletSaveFailed, WalletSaveUnknown],
    Field(discriminator="kind"),
]


class BillingInfo(BaseModel):
    """
    Fields read out of a successful payment payload.

    Attributes:
        billing_name: Name on the billing address; shown to the user
        token: Tokenization data; logged, never shown
    """
    billing_name: str = Field(alias="billingName")
    token: str

    model_config = {"populate_by_name": True, "frozen": True}
