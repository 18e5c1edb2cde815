"""Mini README: FastAPI JSON API over a single ledger.

Structure:
    * create_application - application factory wiring routes to a ledger.
    * EntryRequest / ExpiryRequest - request bodies for mutating routes.

The factory builds one ``Ledger`` backed by JSON file storage in the
configured data directory unless a ledger is passed in (tests do this).
Ledger errors surface as HTTP 400 responses carrying the error message.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from ..configuration import get_settings
from ..ledger import Ledger, LedgerError, build_outlook
from ..logging_utils import get_logger
from ..storage import JsonFileStorage
from ..utils import clamp_to_today

LOGGER = get_logger(__name__)

BACKUP_FILENAME = "balance-backup.json"


class EntryRequest(BaseModel):
    expression: str = Field(..., description="Amount or arithmetic, e.g. '-120' or '50+25'.")
    description: str = Field(..., description="Label shown in the history.")


class ExpiryRequest(BaseModel):
    expiry: date = Field(..., description="Last day of the budgeting period.")


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``ledger``."""

    settings = get_settings()
    if ledger is None:
        ledger = Ledger(
            JsonFileStorage(settings.data_directory), storage_key=settings.storage_key
        )
    app = FastAPI(title="Balance Tracker", version="1.0.0")

    def state_payload() -> Dict[str, Any]:
        outlook = build_outlook(
            ledger.state,
            weekly_allowance=settings.weekly_allowance,
            caution_margin=settings.caution_margin,
        )
        return {
            "balance": ledger.state.balance,
            "expiry": ledger.state.expiry,
            "entries": len(ledger.state.history),
            "outlook": outlook.as_dict(),
        }

    @app.get("/api/state")
    def read_state() -> JSONResponse:
        """Return the balance, expiry and budget outlook."""

        return JSONResponse(state_payload())

    @app.get("/api/history")
    def read_history(limit: Optional[int] = Query(None, ge=1)) -> JSONResponse:
        """Return the most recent entries, newest first."""

        count = limit or settings.history_display_limit
        recent = ledger.state.history[-count:][::-1]
        LOGGER.debug("Returning %s of %s entries", len(recent), len(ledger.state.history))
        return JSONResponse({"history": [entry.as_dict() for entry in recent]})

    @app.post("/api/entries")
    def add_entry(request: EntryRequest) -> JSONResponse:
        """Apply an adjustment and return its delta."""

        description = request.description.strip()
        if not description:
            raise HTTPException(status_code=400, detail="Description required")
        try:
            delta = ledger.add_entry(request.expression, description)
        except LedgerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"delta": delta, "state": state_payload()})

    @app.post("/api/undo")
    def undo() -> JSONResponse:
        """Remove the most recent entry if there is one."""

        undone = ledger.undo()
        return JSONResponse({"undone": undone, "state": state_payload()})

    @app.put("/api/expiry")
    def update_expiry(request: ExpiryRequest) -> JSONResponse:
        """Set the period expiry, never earlier than today."""

        expiry = clamp_to_today(request.expiry)
        if expiry != request.expiry.isoformat():
            LOGGER.info("Requested expiry %s is in the past; using %s", request.expiry, expiry)
        ledger.update_expiry(expiry)
        return JSONResponse(state_payload())

    @app.get("/api/export")
    def export_backup() -> Response:
        """Download the full ledger snapshot."""

        return Response(
            content=ledger.export_data(),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{BACKUP_FILENAME}"'},
        )

    @app.post("/api/import")
    def import_backup(backup: UploadFile = File(...)) -> JSONResponse:
        """Replace the ledger with an uploaded backup file."""

        data = backup.file.read()
        LOGGER.info("Received backup upload %s (%s bytes)", backup.filename, len(data))
        try:
            ledger.import_data(data.decode("utf-8"))
        except UnicodeDecodeError as error:
            raise HTTPException(status_code=400, detail="Invalid backup file") from error
        except LedgerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(state_payload())

    return app
