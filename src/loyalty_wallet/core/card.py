"""
Loyalty card record and its JSON encode/decode pair.
"""

import json
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class CodeType(str, Enum):
    """Symbology used to render a card's code."""
    BARCODE = "barcode"
    QRCODE = "qrcode"


class CardDecodeError(ValueError):
    """Raised when a stored value does not have the shape of a card."""


def _new_card_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class LoyaltyCard:
    """
    One loyalty-program card.

    Cards are never edited after creation. Equality compares the identifier
    and every field, so two cards with the same content but different ids
    are not equal.
    """
    store_name: str
    code_data: str
    code_type: CodeType = CodeType.BARCODE
    notes: Optional[str] = None
    id: str = field(default_factory=_new_card_id)

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted shape of this card."""
        return {
            "id": self.id,
            "storeName": self.store_name,
            "codeData": self.code_data,
            "codeType": self.code_type.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "LoyaltyCard":
        """
        Build a card from its persisted shape.

        Args:
            data: Mapping produced by ``to_dict`` (or read back from storage)

        Returns:
            LoyaltyCard: The decoded card, with its stored identifier

        Raises:
            CardDecodeError: If a required field is missing or mistyped,
                the identifier is not a UUID or the code type is unknown
        """
        if not isinstance(data, dict):
            raise CardDecodeError(f"Expected an object, got {type(data).__name__}")

        values = {}
        for key in ("id", "storeName", "codeData", "codeType"):
            if key not in data:
                raise CardDecodeError(f"Missing field '{key}'")
            if not isinstance(data[key], str):
                raise CardDecodeError(f"Field '{key}' must be a string")
            values[key] = data[key]

        notes = data.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise CardDecodeError("Field 'notes' must be a string or null")

        try:
            card_id = str(uuid.UUID(values["id"]))
        except ValueError:
            raise CardDecodeError(f"Invalid card id: {values['id']!r}")

        try:
            code_type = CodeType(values["codeType"])
        except ValueError:
            raise CardDecodeError(f"Unknown code type: {values['codeType']!r}")

        return cls(
            store_name=values["storeName"],
            code_data=values["codeData"],
            code_type=code_type,
            notes=notes,
            id=card_id,
        )


def encode_cards(cards: Iterable[LoyaltyCard]) -> bytes:
    """Serialize a card sequence to UTF-8 JSON bytes."""
    return json.dumps([card.to_dict() for card in cards]).encode("utf-8")


def decode_cards(blob) -> List[LoyaltyCard]:
    """
    Deserialize a card list. A single bad element fails the whole decode.

    Raises:
        CardDecodeError: If the value is not a list of valid cards
        json.JSONDecodeError: If the blob is not JSON
    """
    data = json.loads(blob)
    if not isinstance(data, list):
        raise CardDecodeError(f"Expected a list of cards, got {type(data).__name__}")
    return [LoyaltyCard.from_dict(item) for item in data]
