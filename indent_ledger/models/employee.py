from typing import Optional

from pydantic import Field

from indent_ledger.models.base import LedgerRecord, new_id


class Employee(LedgerRecord):
    id: str = Field(default_factory=new_id)
    name: str
    post: str = ""
    mobile: str = ""
    join_date: str = ""
    salary: float = 0
    address: str = ""
    optional: str = ""
    guardian_mobile: str = ""
    role: Optional[str] = None  # Admin | Operator
    status: Optional[str] = None  # Active | Locked
