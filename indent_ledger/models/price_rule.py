from enum import Enum

from pydantic import Field

from indent_ledger.models.base import LedgerRecord, new_id


class RateCategory(str, Enum):
    DOC = "DOC"
    CTN = "CTN"
    TON = "TON"
    UNLOAD = "UNLOAD"
    CON = "CON"


class PriceRule(LedgerRecord):
    """Operator-defined rate override.

    The rule applies when `condition` appears (case-insensitive) in the
    shipment's buyer, shipper or depot.
    """

    id: str = Field(default_factory=new_id)
    category: RateCategory
    condition: str = ""
    rate: float = Field(ge=0)
