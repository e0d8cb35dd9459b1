from typing import List

from pydantic import Field

from indent_ledger.models.base import LedgerModel


class ReplicationReport(LedgerModel):
    action: str
    collections: List[str] = Field(default_factory=list)
