import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .routes.receipts import router as receipts_router
from .store.repository import ReceiptStore, get_store
from .utils.logging import configure_logging, logger

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.include_router(receipts_router)

@app.exception_handler(RequestValidationError)
async def invalid_receipt(request: Request, exc: RequestValidationError):
    # malformed JSON or wrongly typed fields: reject before any scoring
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "The receipt is invalid."})

@app.get("/health")
def health(store: ReceiptStore = Depends(get_store)):
    return {"ok": True, "receipts": len(store)}

def run() -> None:
    configure_logging()
    logger.info("Server is running on %s:%s (%s)", settings.HOST, settings.PORT, settings.ENV)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
