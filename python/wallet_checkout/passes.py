"""
Location: python/wallet_checkout/passes.py

Summary:
    Save-to-wallet document models. Builds the unsigned "savetowallet"
    document for a loyalty pass, embedding a freshly generated object id
    and the static reward-program content, and parses such documents back.

Usage:
    Used by wallet.py when no document is supplied to save_passes().

Example:
    from wallet_checkout.passes import new_loyalty_document, parse_wallet_document
    from wallet_checkout.types import WalletConfig

    document = new_loyalty_document(WalletConfig())
    text = document.to_json()
    assert parse_wallet_document(text).object_ids == document.object_ids
"""

import time
import uuid
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .provider import WalletDocumentError
from .types import WalletConfig


class _WalletModel(BaseModel):
    model_config = {"populate_by_name": True}


class Barcode(_WalletModel):
    type: str = "qrCode"
    value: str
    alternate_text: Optional[str] = Field(None, alias="alternateText")


class Uri(_WalletModel):
    uri: str
    description: Optional[str] = None
    kind: str = "walletobjects#uri"


class LinksModuleData(_WalletModel):
    uris: list[Uri] = Field(default_factory=list)


class LabelValue(_WalletModel):
    label: str
    value: str


class LabelValueRow(_WalletModel):
    columns: list[LabelValue]


class InfoModuleData(_WalletModel):
    label_value_rows: list[LabelValueRow] = Field(default_factory=list, alias="labelValueRows")
    show_last_update_time: str = Field("true", alias="showLastUpdateTime")


class LoyaltyPointsBalance(_WalletModel):
    string: Optional[str] = None
    int_value: Optional[int] = Field(None, alias="int")


class LoyaltyPoints(_WalletModel):
    label: str
    balance: LoyaltyPointsBalance


class TextModuleData(_WalletModel):
    header: str
    body: str


class LoyaltyObject(_WalletModel):
    """
    A loyalty object as embedded in a save-to-wallet document.

    Attributes:
        id: "<issuer_id>.<unique suffix>"
        class_id: "<issuer_id>.<class suffix>"
    """
    id: str
    class_id: str = Field(alias="classId")
    state: str = "active"
    version: int = 1
    account_id: Optional[str] = Field(None, alias="accountId")
    account_name: Optional[str] = Field(None, alias="accountName")
    barcode: Optional[Barcode] = None
    loyalty_points: Optional[LoyaltyPoints] = Field(None, alias="loyaltyPoints")
    info_module_data: Optional[InfoModuleData] = Field(None, alias="infoModuleData")
    links_module_data: Optional[LinksModuleData] = Field(None, alias="linksModuleData")
    text_modules_data: list[TextModuleData] = Field(default_factory=list, alias="textModulesData")

    @property
    def issuer_id(self) -> str:
        return self.id.split(".", 1)[0]


class SaveToWalletPayload(_WalletModel):
    loyalty_objects: list[LoyaltyObject] = Field(default_factory=list, alias="loyaltyObjects")


class SaveToWalletDocument(_WalletModel):
    """
    The "savetowallet" document handed to the wallet provider.

    Attributes:
        iss: Issuer service account email
        iat: Issued-at, unix seconds
        origins: Web origins allowed to save the document
        payload: The objects to save
    """
    aud: Literal["google"] = "google"
    typ: Literal["savetowallet"] = "savetowallet"
    iss: str
    iat: int
    origins: list[str] = Field(default_factory=list)
    payload: SaveToWalletPayload

    @property
    def object_ids(self) -> list[str]:
        return [obj.id for obj in self.payload.loyalty_objects]

    def to_json(self) -> str:
        """Serialize with the provider's camelCase field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def new_loyalty_object(
    config: WalletConfig,
    object_suffix: Optional[str] = None,
) -> LoyaltyObject:
    """
    Build the demo loyalty object with a unique id.

    Args:
        config: Issuer identity
        object_suffix: Unique part of the object id; a random UUID if omitted

    Returns:
        LoyaltyObject carrying the static reward-program content
    """
    suffix = object_suffix or str(uuid.uuid4())
    return LoyaltyObject(
        id=f"{config.issuer_id}.{suffix}",
        class_id=config.class_id,
        account_id="1234567890",
        account_name="Jane Doe",
        barcode=Barcode(type="qrCode", value="28343E3", alternate_text="12345"),
        loyalty_points=LoyaltyPoints(
            label="Points",
            balance=LoyaltyPointsBalance(string="500"),
        ),
        info_module_data=InfoModuleData(
            label_value_rows=[
                LabelValueRow(columns=[
                    LabelValue(label="Member Name", value="Jane Doe"),
                    LabelValue(label="Membership #", value="1234567890"),
                ]),
                LabelValueRow(columns=[
                    LabelValue(label="Next Reward in", value="2 coffees"),
                    LabelValue(label="Member Since", value="01/15/2013"),
                ]),
            ],
        ),
        links_module_data=LinksModuleData(uris=[
            Uri(
                uri="https://www.baconrista.com/myaccount?id=1234567890",
                description="My Baconrista Account",
            ),
        ]),
        text_modules_data=[
            TextModuleData(
                header="Jane's Baconrista Rewards",
                body="You are 5 coffees away from receiving a free bacon fat latte. ",
            ),
        ],
    )


def new_loyalty_document(
    config: WalletConfig,
    *,
    object_suffix: Optional[str] = None,
    issued_at: Optional[int] = None,
) -> SaveToWalletDocument:
    """
    Build a save-to-wallet document holding one new loyalty object.

    Args:
        config: Issuer identity and origins
        object_suffix: Unique part of the object id; a random UUID if omitted
        issued_at: Unix seconds for `iat`; the current time if omitted

    Returns:
        SaveToWalletDocument ready for to_json()
    """
    return SaveToWalletDocument(
        iss=config.issuer_email,
        iat=int(time.time()) if issued_at is None else issued_at,
        origins=list(config.origins),
        payload=SaveToWalletPayload(
            loyalty_objects=[new_loyalty_object(config, object_suffix)],
        ),
    )


def parse_wallet_document(text: str) -> SaveToWalletDocument:
    """
    Parse a serialized save-to-wallet document.

    Args:
        text: JSON document text

    Returns:
        SaveToWalletDocument

    Raises:
        WalletDocumentError: If the text is not a valid document
    """
    try:
        return SaveToWalletDocument.model_validate_json(text)
    except ValidationError as e:
        raise WalletDocumentError(f"Invalid save-to-wallet document: {e}") from e
