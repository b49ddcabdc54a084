"""Mini README: FastAPI JSON interface over the transaction query engine.

Structure:
    * create_application - application factory wiring one route per query.

The factory accepts a prebuilt ``TransactionDataFetcher`` (used by tests and
embedding callers); otherwise it loads the export named by the settings.
Domain errors are translated into HTTP errors here and nowhere else.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from ..analytics import TransactionDataFetcher
from ..configuration import get_settings
from ..errors import EmptyDatasetError
from ..logging_utils import get_logger
from ..records import load_transactions

LOGGER = get_logger(__name__)


def create_application(fetcher: Optional[TransactionDataFetcher] = None) -> FastAPI:
    """Create the FastAPI application serving analytics for one dataset."""

    settings = get_settings()
    if fetcher is None:
        fetcher = TransactionDataFetcher(load_transactions(settings.data_file))

    app = FastAPI(title="Transaction Insights", version="0.1.0")
    LOGGER.info(
        "Serving %s transaction records (environment=%s)", len(fetcher), settings.environment
    )

    @app.get("/summary")
    async def summary(client: Optional[str] = None) -> JSONResponse:
        """Return every aggregate in one payload."""

        return JSONResponse(fetcher.summarise(client_name=client))

    @app.get("/transactions/total-amount")
    async def total_amount() -> JSONResponse:
        return JSONResponse({"total_amount": fetcher.total_transaction_amount()})

    @app.get("/transactions/max-amount")
    async def max_amount() -> JSONResponse:
        """Return the largest transaction amount, or 404 when nothing is loaded."""

        try:
            value = fetcher.max_transaction_amount()
        except EmptyDatasetError as error:
            LOGGER.warning("Max amount requested with no transactions loaded")
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"max_amount": value})

    @app.get("/transactions/top")
    async def top_transactions(limit: int = Query(3)) -> JSONResponse:
        try:
            ranked = fetcher.top3_transactions_by_amount(limit=limit)
        except ValueError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        LOGGER.debug("Returning %s top transactions", len(ranked))
        return JSONResponse({"transactions": [transaction.as_dict() for transaction in ranked]})

    @app.get("/clients/count")
    async def unique_clients() -> JSONResponse:
        return JSONResponse({"unique_clients": fetcher.count_unique_clients()})

    @app.get("/clients/{name}/total-sent")
    async def total_sent(name: str) -> JSONResponse:
        return JSONResponse(
            {"name": name, "total_sent": fetcher.total_transaction_amount_sent_by(name)}
        )

    @app.get("/clients/{name}/open-issues")
    async def open_issues(name: str) -> JSONResponse:
        return JSONResponse(
            {
                "name": name,
                "has_open_compliance_issues": fetcher.has_open_compliance_issues(name),
            }
        )

    @app.get("/beneficiaries")
    async def beneficiaries() -> JSONResponse:
        """Return records grouped by beneficiary, each group ordered by ``mtn``."""

        grouped = fetcher.transactions_by_beneficiary_name()
        payload = {
            name: [
                transaction.as_dict()
                for transaction in sorted(
                    records, key=lambda record: (record.mtn, record.issue_id or 0)
                )
            ]
            for name, records in grouped.items()
        }
        return JSONResponse({"beneficiaries": payload})

    @app.get("/issues/unsolved")
    async def unsolved_issues() -> JSONResponse:
        return JSONResponse({"issue_ids": sorted(fetcher.unsolved_issue_ids())})

    @app.get("/issues/solved-messages")
    async def solved_messages() -> JSONResponse:
        return JSONResponse({"messages": fetcher.all_solved_issue_messages()})

    @app.get("/senders/top")
    async def top_sender() -> JSONResponse:
        return JSONResponse({"top_sender": fetcher.top_sender()})

    return app
