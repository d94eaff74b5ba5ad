"""Mini README: FastAPI-powered finance tracker interface.

Structure:
    * create_application - application factory wiring routes and templates.
    * AppState - loaded once per application and mutated by the form routes.

Pages render the ledger projection (summary cards, bar chart, category pie
chart, transaction list) and every form posts back a user intent: add,
delete, clear, change month filter, toggle dark mode. Each mutation is
followed by a redirect so the next GET re-runs the projection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import PennywiseSettings, get_settings
from ..finance import Category, TransactionType, ValidationError
from ..logging_utils import configure_root_logger, get_logger
from ..state import AppState

LOGGER = get_logger(__name__)


def _safe_next(target: Optional[str], default: str) -> str:
    """Only follow local redirects."""

    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return default


def create_application(
    settings: Optional[PennywiseSettings] = None,
    state: Optional[AppState] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and shared state."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    state = state or AppState.from_settings(settings)

    app = FastAPI(title="Pennywise Finance Tracker", version="0.1.0")
    app.state.tracker = state
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["money"] = lambda value: f"{settings.currency_symbol}{abs(value):.2f}"
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    def render(request: Request, template: str, **context: object) -> HTMLResponse:
        projection = state.projection()
        return templates.TemplateResponse(
            request,
            template,
            {
                "projection": projection,
                "filter_month": state.filter_month,
                "dark_mode": state.dark_mode,
                "currency_symbol": settings.currency_symbol,
                "categories": [category.value for category in Category],
                "transaction_types": [kind.value for kind in TransactionType],
                **context,
            },
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render summary cards and both charts for the selected month."""

        LOGGER.debug("Rendering dashboard for month '%s'", state.filter_month or "all")
        return render(request, "dashboard.html", active_page="dashboard")

    @app.get("/transactions", response_class=HTMLResponse)
    async def transactions_page(request: Request) -> HTMLResponse:
        """Render the entry form and the newest-first transaction list."""

        return render(request, "transactions.html", active_page="transactions")

    @app.post("/transactions")
    async def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        transaction_type: str = Form(TransactionType.INCOME.value, alias="type"),
        category: str = Form(Category.GENERAL.value),
        occurred_on: str = Form("", alias="date"),
    ) -> RedirectResponse:
        """Record a transaction from the entry form."""

        try:
            transaction = state.ledger.add(
                description,
                amount,
                category,
                occurred_on,
                transaction_type,
            )
        except ValidationError as error:
            LOGGER.info("Rejected transaction (%s): %s", error.field, error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.debug("Transaction %s recorded via form", transaction.transaction_id)
        return RedirectResponse("/transactions", status_code=303)

    @app.post("/transactions/clear")
    async def clear_transactions(confirm: str = Form("")) -> RedirectResponse:
        """Empty the ledger once the user has confirmed."""

        if confirm.strip().lower() != "yes":
            raise HTTPException(status_code=400, detail="Clearing requires confirm=yes")
        state.ledger.clear()
        return RedirectResponse("/transactions", status_code=303)

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(transaction_id: int) -> RedirectResponse:
        """Delete a transaction; unknown ids are ignored."""

        state.ledger.remove(transaction_id)
        return RedirectResponse("/transactions", status_code=303)

    @app.post("/filter")
    async def change_filter(
        month: str = Form(""),
        next_page: str = Form("/", alias="next"),
    ) -> RedirectResponse:
        """Persist the month filter used by every projection."""

        try:
            state.set_filter_month(month)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return RedirectResponse(_safe_next(next_page, "/"), status_code=303)

    @app.post("/dark-mode")
    async def toggle_dark_mode(next_page: str = Form("/", alias="next")) -> RedirectResponse:
        """Flip the persisted dark-mode flag."""

        state.toggle_dark_mode()
        return RedirectResponse(_safe_next(next_page, "/"), status_code=303)

    @app.get("/api/summary")
    async def summary(month: Optional[str] = None) -> JSONResponse:
        """Return the projection as JSON, using the stored filter when ``month`` is omitted."""

        try:
            projection = state.projection(month)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        payload = projection.as_dict()
        payload["dark_mode"] = state.dark_mode
        return JSONResponse(payload)

    @app.get("/api/transactions")
    async def list_transactions() -> JSONResponse:
        """Return the full ledger, newest first."""

        return JSONResponse(
            {"transactions": [record.as_dict() for record in state.ledger.list()]}
        )

    @app.get("/api/transactions/{transaction_id}")
    async def get_transaction(transaction_id: int) -> JSONResponse:
        try:
            transaction = state.ledger.get(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(transaction.as_dict())

    return app
