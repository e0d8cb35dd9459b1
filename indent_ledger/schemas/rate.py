from pydantic import Field

from indent_ledger.models.base import LedgerModel
from indent_ledger.models.price_rule import RateCategory


class PriceRuleCreate(LedgerModel):
    category: RateCategory
    condition: str
    rate: float = Field(ge=0)
