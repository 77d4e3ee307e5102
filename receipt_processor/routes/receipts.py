import re

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import IdResponse, PointsResponse, Receipt
from ..services.scoring import calculate_points
from ..store.repository import ReceiptStore, get_store
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

RECEIPT_ID_RE = re.compile(r"[a-zA-Z0-9-]+")
NOT_FOUND = "No receipt found for that ID."

@router.post("/process", response_model=IdResponse,
             responses={400: {"description": "The receipt is invalid."}})
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    # score before touching the store so the lock is only held for the insert
    points = calculate_points(receipt)
    receipt_id = store.put(receipt, points)
    logger.info("Accepted receipt %s (%d points)", receipt_id, points)
    return IdResponse(id=receipt_id)

@router.get("/{receipt_id}", response_model=PointsResponse,
            responses={404: {"description": NOT_FOUND}})
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    row = store.get(receipt_id) if RECEIPT_ID_RE.fullmatch(receipt_id) else None
    if row is None:
        logger.warning("Unknown receipt id %r", receipt_id)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return PointsResponse(points=row.points)
