"""
Indent calculator - the single formula for a shipment's billed total.

    depot_indent    = doc*docRate + ctn*ctnRate + ton*tonRate
                      + unload*unloadRate + con*conRate + other
    association_fee = doc * 85
    office_income   = doc * officeRate
    total_indent    = depot_indent + association_fee + office_income

Every path that derives total_indent (entry, edit, import) goes through
here, and the total is always recomputed in full.
"""

from dataclasses import dataclass
from typing import Iterable

from indent_ledger.models.price_rule import PriceRule
from indent_ledger.models.shipment import Shipment
from indent_ledger.services.rate_table import RateTable, ResolvedRates


@dataclass(frozen=True)
class IndentBreakdown:
    rates: ResolvedRates
    depot_indent: float
    association_fee: float
    office_income: float

    @property
    def total_indent(self) -> float:
        return self.depot_indent + self.association_fee + self.office_income


def calculate_indent(shipment: Shipment, price_rules: Iterable[PriceRule] = ()) -> IndentBreakdown:
    rates = RateTable.with_price_rules(price_rules).resolve(
        shipment.buyer, shipment.shipper, shipment.depot
    )

    depot_indent = (
        shipment.doc_qty * rates.doc
        + shipment.ctn_qty * rates.ctn
        + shipment.ton_qty * rates.ton
        + shipment.unload_qty * rates.unload
        + shipment.con_qty * rates.con
        + shipment.other_amt
    )

    return IndentBreakdown(
        rates=rates,
        depot_indent=depot_indent,
        association_fee=shipment.doc_qty * rates.association,
        office_income=shipment.doc_qty * rates.office,
    )


def apply_indent(shipment: Shipment, price_rules: Iterable[PriceRule] = ()) -> Shipment:
    """Overwrite total_indent from the shipment's own fields. Returns the shipment."""
    shipment.total_indent = calculate_indent(shipment, price_rules).total_indent
    return shipment
