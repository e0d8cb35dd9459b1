from typing import List

from pydantic import Field

from indent_ledger.models.base import LedgerRecord


class ReferenceLists(LedgerRecord):
    """Operator pick-lists. sub_accounts names the internal cash buckets."""

    shipper: List[str] = Field(default_factory=list)
    buyer: List[str] = Field(default_factory=list)
    depot: List[str] = Field(default_factory=list)
    staff: List[str] = Field(default_factory=list)
    exporter: List[str] = Field(default_factory=list)
    export_info: List[str] = Field(default_factory=list)
    sub_accounts: List[str] = Field(default_factory=list)
