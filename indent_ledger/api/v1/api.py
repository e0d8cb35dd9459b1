from fastapi import APIRouter
from indent_ledger.api.v1.endpoints import shipments, settlements, transactions, reports, rates, replication

api_router = APIRouter()

api_router.include_router(shipments.router, prefix="/shipments", tags=["shipments"])
api_router.include_router(settlements.router, prefix="/settlements", tags=["settlements"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(rates.router, prefix="/rates", tags=["rates"])
api_router.include_router(replication.router, prefix="/replication", tags=["replication"])
