"""FastAPI main application."""
import logging

from fastapi import Depends, FastAPI, HTTPException, Request

from receipt_points.config import config, Config
from receipt_points.errors import InvalidPayload, ReceiptNotFound
from receipt_points.parse.models import PointsResponse, ReceiptIdResponse
from receipt_points.service import ReceiptService

logger = logging.getLogger(__name__)

app = FastAPI(title="Receipt Points API", version="0.1.0")

# Initialize components
service = ReceiptService(strict_total=config.STRICT_TOTAL)


def get_service() -> ReceiptService:
    """Service used by the routes (overridable in tests)."""
    return service


@app.post("/receipts/process", response_model=ReceiptIdResponse)
async def process_receipt(
    request: Request,
    receipt_service: ReceiptService = Depends(get_service),
):
    """
    Store a receipt and return its id.
    The body is decoded here rather than by FastAPI so that malformed
    receipts are answered with 400 instead of 422.
    """
    try:
        body = await request.body()
        receipt_id = receipt_service.submit(body)
        return ReceiptIdResponse(id=receipt_id)
    except InvalidPayload as e:
        logger.warning(f"Rejected receipt: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error processing receipt: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
async def get_points(
    receipt_id: str,
    receipt_service: ReceiptService = Depends(get_service),
):
    """Points awarded for a stored receipt."""
    try:
        points = receipt_service.get_points(receipt_id)
        return PointsResponse(points=points)
    except ReceiptNotFound:
        logger.warning(f"Points requested for unknown receipt {receipt_id}")
        raise HTTPException(status_code=404, detail="Receipt not found")
    except Exception as e:
        logger.error(f"Error scoring receipt {receipt_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


if __name__ == "__main__":
    import uvicorn
    from receipt_points.logging_conf import setup_logging

    Config.validate()
    setup_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)
