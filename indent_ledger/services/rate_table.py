"""
Rate table - resolves per-unit rates for a shipment's buyer/shipper/depot.

Rules are data: an ordered list of (category, predicate, rate). For each
component the first matching rule wins; with no match the default applies.
Operator price rules are consulted ahead of the built-in rules of the same
category, in the order they are stored.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from indent_ledger.models.price_rule import PriceRule, RateCategory
from indent_ledger.models.shipment import ASSOCIATION_FEE_RATE

logger = logging.getLogger(__name__)

OFFICE = "OFFICE"

DEFAULT_RATES: Dict[str, float] = {
    RateCategory.DOC.value: 485,
    RateCategory.CTN.value: 3,
    RateCategory.TON.value: 249,
    RateCategory.UNLOAD.value: 150,
    RateCategory.CON.value: 150,
    OFFICE: 80,
}

CONTAINER_PREMIUM_DEPOTS = frozenset({"KDS", "SAVER", "NAMSUN"})


@dataclass(frozen=True)
class Classification:
    """Upper-cased buyer/shipper/depot, blanks for missing values."""
    buyer: str = ""
    shipper: str = ""
    depot: str = ""

    @classmethod
    def of(cls, buyer: Optional[str], shipper: Optional[str], depot: Optional[str]) -> "Classification":
        return cls(
            buyer=(buyer or "").strip().upper(),
            shipper=(shipper or "").strip().upper(),
            depot=(depot or "").strip().upper(),
        )


Predicate = Callable[[Classification], bool]


@dataclass(frozen=True)
class RateRule:
    category: str
    predicate: Predicate
    rate: float
    label: str = ""

    def matches(self, classification: Classification) -> bool:
        return self.predicate(classification)


@dataclass(frozen=True)
class ResolvedRates:
    doc: float
    ctn: float
    ton: float
    unload: float
    con: float
    office: float
    association: float = ASSOCIATION_FEE_RATE


# Priority order within each category is significant.
BUILTIN_RULES: List[RateRule] = [
    RateRule(
        RateCategory.DOC.value,
        lambda c: "H&M" in c.buyer and "SEA AIR" in c.buyer,
        270,
        "H&M sea-air documentation",
    ),
    RateRule(RateCategory.DOC.value, lambda c: "H&M" in c.buyer, 220, "H&M documentation"),
    RateRule(
        RateCategory.UNLOAD.value,
        lambda c: "CONFIDENCE" in c.shipper and ("MATALON" in c.buyer or "PRIMARK" in c.buyer),
        300,
        "Confidence unload for Matalon/Primark",
    ),
    RateRule(
        RateCategory.CON.value,
        lambda c: c.depot in CONTAINER_PREMIUM_DEPOTS,
        200,
        "Premium container depots",
    ),
    RateRule(OFFICE, lambda c: "H&M" in c.buyer, 75, "H&M office income"),
]


def price_rule_predicate(condition: str) -> Predicate:
    """Substring match of an operator condition against buyer, shipper or depot."""
    needle = (condition or "").strip().upper()

    def predicate(c: Classification) -> bool:
        if not needle:
            return False
        return needle in c.buyer or needle in c.shipper or needle in c.depot

    return predicate


def compile_price_rules(price_rules: Iterable[PriceRule]) -> List[RateRule]:
    return [
        RateRule(
            category=rule.category.value,
            predicate=price_rule_predicate(rule.condition),
            rate=max(0.0, rule.rate),
            label=f"price rule {rule.id}",
        )
        for rule in price_rules
    ]


class RateTable:
    """Ordered rule list with defaults."""

    def __init__(self, rules: Iterable[RateRule], defaults: Optional[Dict[str, float]] = None):
        self.rules = list(rules)
        self.defaults = dict(DEFAULT_RATES if defaults is None else defaults)

    @classmethod
    def with_price_rules(cls, price_rules: Iterable[PriceRule] = ()) -> "RateTable":
        return cls(compile_price_rules(price_rules) + BUILTIN_RULES)

    def rate_for(self, category: str, classification: Classification) -> float:
        for rule in self.rules:
            if rule.category == category and rule.matches(classification):
                logger.debug(f"Rate {category}={rule.rate} from {rule.label or 'rule'}")
                return rule.rate
        return self.defaults[category]

    def resolve(self, buyer: Optional[str], shipper: Optional[str], depot: Optional[str]) -> ResolvedRates:
        c = Classification.of(buyer, shipper, depot)
        return ResolvedRates(
            doc=self.rate_for(RateCategory.DOC.value, c),
            ctn=self.rate_for(RateCategory.CTN.value, c),
            ton=self.rate_for(RateCategory.TON.value, c),
            unload=self.rate_for(RateCategory.UNLOAD.value, c),
            con=self.rate_for(RateCategory.CON.value, c),
            office=self.rate_for(OFFICE, c),
        )


def resolve_rates(
    buyer: Optional[str],
    shipper: Optional[str],
    depot: Optional[str],
    price_rules: Iterable[PriceRule] = (),
) -> ResolvedRates:
    return RateTable.with_price_rules(price_rules).resolve(buyer, shipper, depot)
