# client_parser/api.py

from fastapi import APIRouter, Request
from pydantic import ValidationError
from typing import Optional
from client_parser.classifier import classify_cached
from client_parser.schemas import ClassifyRequest, ClassifyResponse, ResultShape, render
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/classify", response_model=ClassifyResponse)
async def classify_batch(request: Request, shape: ResultShape = "nested") -> ClassifyResponse:
    """
    Classify user agents sent by the caller.
    Accepts a single item or an array of items.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected non-JSON body: {e}")
        return ClassifyResponse(status="error", processed=0, errors=1)

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return ClassifyResponse(status="error", processed=0, errors=1)

    processed = 0
    errors = 0
    results = []

    for item_data in items:
        try:
            item = ClassifyRequest(**item_data)
        except (TypeError, ValidationError) as e:
            errors += 1
            logger.warning(f"Failed to process item: {e}")
            continue

        results.append(render(classify_cached(item.user_agent, item.platform), shape))
        processed += 1

    if processed == 0 and errors:
        status = "error"
    else:
        status = "ok" if errors == 0 else "partial"

    return ClassifyResponse(status=status, processed=processed, errors=errors, results=results)


@router.get("/api/classify")
async def classify_caller(request: Request, platform: Optional[str] = None,
                          shape: ResultShape = "nested") -> dict:
    """Classify the calling client's own User-Agent header"""
    user_agent = request.headers.get("user-agent", "")
    return render(classify_cached(user_agent, platform), shape)


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
