"""
Cash ledger - manual cash movements and inter-account transfers.

A cash-out always books a Cash Out on the source account, then links the
payee in exactly one way:
1. payee is a sub-account -> mirrored Cash In on that account
2. payee is an employee   -> FIFO allocation over the employee's shipments
3. anyone else            -> no linkage

Special entries belong to named special accounts and stay out of the
cash totals and sub-account balances.
"""

import logging
from typing import Dict, Optional

from indent_ledger.core.errors import ValidationError
from indent_ledger.models.cash import CashOutResult, CashTotals, PayeeKind
from indent_ledger.models.report import AccountsSummary
from indent_ledger.models.transaction import Transaction, TransactionType
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.services.settlement_service import SettlementLedger, is_positive_amount

logger = logging.getLogger(__name__)


class CashLedger:
    def __init__(self, store: LedgerStore, settlement: Optional[SettlementLedger] = None):
        self.store = store
        self.settlement = settlement or SettlementLedger(store)

    def _record(self, transaction: Transaction) -> Transaction:
        # Most recent first
        self.store.transactions.insert(0, transaction)
        return transaction

    def post_cash_in(
        self,
        sub_account: str,
        amount: float,
        description: str = "",
        category: str = "",
        invoice_no: Optional[str] = None,
    ) -> Transaction:
        if not sub_account:
            raise ValidationError("Sub-account is required")
        if not is_positive_amount(amount):
            raise ValidationError("Amount must be greater than zero")

        transaction = self._record(Transaction(
            type=TransactionType.CASH_IN,
            sub_account=sub_account,
            amount=amount,
            description=description,
            category=category,
            invoice_no=invoice_no,
        ))
        logger.info(f"Cash in {amount:.2f} to {sub_account}")
        return transaction

    def post_cash_out(
        self,
        source_sub_account: str,
        payee: str,
        amount: float,
        remarks: str = "",
    ) -> CashOutResult:
        if not source_sub_account:
            raise ValidationError("Source sub-account is required")
        if not payee:
            raise ValidationError("Payee is required")
        if not is_positive_amount(amount):
            raise ValidationError("Amount must be greater than zero")

        out = Transaction(
            type=TransactionType.CASH_OUT,
            sub_account=source_sub_account,
            amount=amount,
            description=f"Payment to: {payee} ({remarks})",
            remarks=remarks or None,
        )

        if payee in self.store.sub_account_names():
            mirror = Transaction(
                type=TransactionType.CASH_IN,
                sub_account=payee,
                amount=amount,
                description=f"Transfer From: {source_sub_account}",
            )
            self._record(out)
            self._record(mirror)
            logger.info(f"Transfer {amount:.2f} from {source_sub_account} to {payee}")
            return CashOutResult(payee_kind=PayeeKind.TRANSFER, transactions=[out, mirror])

        if payee in self.store.employee_names():
            allocation = self.settlement.allocate_fifo(payee, amount)
            self._record(out)
            logger.info(f"Cash out {amount:.2f} from {source_sub_account} to employee {payee}")
            return CashOutResult(payee_kind=PayeeKind.EMPLOYEE, transactions=[out], allocation=allocation)

        self._record(out)
        logger.info(f"Cash out {amount:.2f} from {source_sub_account} to {payee}")
        return CashOutResult(payee_kind=PayeeKind.EXTERNAL, transactions=[out])

    def delete_transaction(self, transaction_id: str) -> Transaction:
        transaction = self.store.remove_transaction(transaction_id)
        logger.info(f"Transaction {transaction_id} deleted")
        return transaction

    def totals(self) -> CashTotals:
        totals = CashTotals()
        for t in self.store.transactions:
            if t.type == TransactionType.CASH_IN:
                totals.cash_in += t.amount
            elif t.type == TransactionType.CASH_OUT:
                totals.cash_out += t.amount
        return totals

    def sub_account_balances(self) -> Dict[str, float]:
        """Net balance per sub-account; known accounts with no activity show 0."""
        balances: Dict[str, float] = {name: 0.0 for name in self.store.sub_account_names()}
        for t in self.store.transactions:
            if t.type == TransactionType.SPECIAL:
                continue
            key = t.sub_account or ""
            sign = 1 if t.type == TransactionType.CASH_IN else -1
            balances[key] = balances.get(key, 0.0) + sign * t.amount
        return balances

    def post_special(
        self,
        category: str,
        amount: float,
        sub_account: Optional[str] = None,
        description: str = "",
        paid_month: Optional[str] = None,
    ) -> Transaction:
        """Book an entry on a special account (bank deposits, rent, salary...)."""
        if not category:
            raise ValidationError("Special account category is required")
        if not is_positive_amount(amount):
            raise ValidationError("Amount must be greater than zero")

        transaction = self._record(Transaction(
            type=TransactionType.SPECIAL,
            category=category,
            sub_account=sub_account,
            amount=amount,
            description=description,
            paid_month=paid_month,
        ))
        logger.info(f"Special entry {amount:.2f} on {category}")
        return transaction

    def special_account_totals(self) -> Dict[str, float]:
        totals: Dict[str, float] = {}
        for t in self.store.transactions:
            if t.type == TransactionType.SPECIAL:
                totals[t.category] = totals.get(t.category, 0.0) + t.amount
        return totals

    def accounts_summary(self) -> AccountsSummary:
        """
        Billing against collections across both ledgers.

        Collection is shipment payments plus every Cash In; Cash Out is
        added back to the outstanding figure.
        """
        cash = self.totals()
        summary = AccountsSummary(
            total_billed=sum(s.total_indent for s in self.store.shipments),
            total_collection=sum(s.paid for s in self.store.shipments) + cash.cash_in,
            cash_out=cash.cash_out,
        )
        summary.outstanding = summary.total_billed - summary.total_collection + summary.cash_out
        return summary
