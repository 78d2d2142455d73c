import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from receipt_processor.config import configure_logging, load_settings
from receipt_processor.model.ReceiptPayloadModel import ReceiptPayload
from receipt_processor.store.ReceiptStore import ReceiptStore

logger = logging.getLogger(__name__)

INVALID_RECEIPT_DETAIL = "The receipt is invalid."
NOT_FOUND_DETAIL = "No receipt found for that ID."


def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store


def describe_error(error) -> str:
    # loc starts with "body" for request payload errors
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid request body")
    return f"{location}: {message}" if location else message


async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = [describe_error(error) for error in exc.errors()]
    logger.info("Rejected receipt: %s", "; ".join(errors))
    return JSONResponse(status_code=400, content={"detail": INVALID_RECEIPT_DETAIL, "errors": errors})


def create_app(store: Optional[ReceiptStore] = None) -> FastAPI:
    app = FastAPI(title="Receipt Processor")
    app.state.store = store if store is not None else ReceiptStore()

    # Invalid receipts are 400s rather than FastAPI's default 422
    app.add_exception_handler(RequestValidationError, handle_request_validation)

    # Plain def endpoints run in FastAPI's threadpool and share the store
    @app.post("/receipts/process")
    def process_receipt(payload: ReceiptPayload, store: ReceiptStore = Depends(get_store)):
        receipt_id = store.submit(payload.to_receipt())
        return {"id": receipt_id}

    @app.get("/receipts/{receipt_id}/points")
    def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
        points, found = store.lookup(receipt_id)
        if not found:
            raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
        return {"points": points}

    @app.get("/health")
    def health(store: ReceiptStore = Depends(get_store)):
        return {"status": "ok", "receipts": len(store)}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run("receipt_processor.app:app", host=settings.host, port=settings.port,
                reload=settings.reload, log_level=settings.log_level.lower())
