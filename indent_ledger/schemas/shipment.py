from typing import Optional

from pydantic import computed_field, field_validator

from indent_ledger.models.base import LedgerModel, coerce_number
from indent_ledger.models.shipment import SettlementState, Shipment
from indent_ledger.services.indent_calculator import IndentBreakdown


class ShipmentBase(LedgerModel):
    date: Optional[str] = None
    employee_name: str = ""
    job_no: str = ""
    invoice_no: str = ""
    exporter_name: str = ""
    shipper: str = ""
    buyer: str = ""
    depot: str = ""
    doc_qty: float = 0
    ctn_qty: float = 0
    ton_qty: float = 0
    unload_qty: float = 0
    con_qty: float = 0
    other_amt: float = 0
    remarks: str = ""
    cost: float = 0
    profit: float = 0

    @field_validator(
        "doc_qty", "ctn_qty", "ton_qty", "unload_qty", "con_qty", "other_amt", "cost", "profit",
        mode="before",
    )
    @classmethod
    def _blank_is_zero(cls, value):
        return coerce_number(value)


class ShipmentCreate(ShipmentBase):
    pass


class ShipmentUpdate(LedgerModel):
    date: Optional[str] = None
    employee_name: Optional[str] = None
    job_no: Optional[str] = None
    invoice_no: Optional[str] = None
    exporter_name: Optional[str] = None
    shipper: Optional[str] = None
    buyer: Optional[str] = None
    depot: Optional[str] = None
    doc_qty: Optional[float] = None
    ctn_qty: Optional[float] = None
    ton_qty: Optional[float] = None
    unload_qty: Optional[float] = None
    con_qty: Optional[float] = None
    other_amt: Optional[float] = None
    remarks: Optional[str] = None
    cost: Optional[float] = None
    profit: Optional[float] = None


class ShipmentResponse(Shipment):
    @computed_field
    @property
    def outstanding(self) -> float:
        return self.due

    @computed_field
    @property
    def status(self) -> SettlementState:
        return self.settlement_state

    @classmethod
    def from_shipment(cls, shipment: Shipment) -> "ShipmentResponse":
        return cls.model_validate(shipment.model_dump())


class RatesResponse(LedgerModel):
    doc: float
    ctn: float
    ton: float
    unload: float
    con: float
    office: float
    association: float


class IndentBreakdownResponse(LedgerModel):
    rates: RatesResponse
    depot_indent: float
    association_fee: float
    office_income: float
    total_indent: float

    @classmethod
    def from_breakdown(cls, breakdown: IndentBreakdown) -> "IndentBreakdownResponse":
        return cls(
            rates=RatesResponse(**vars(breakdown.rates)),
            depot_indent=breakdown.depot_indent,
            association_fee=breakdown.association_fee,
            office_income=breakdown.office_income,
            total_indent=breakdown.total_indent,
        )
