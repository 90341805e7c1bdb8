from fastapi import APIRouter
from fastapi.responses import JSONResponse
from history_chat.schemas.format import FormatRequest, FormatResponse
from history_chat.services.response_formatter import describe_payload
import asyncio
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Format"]
)


@router.post("/format", response_model=FormatResponse)
async def format_payload(req: FormatRequest):
    """
    Formats a backend chat payload into markdown.
    Large event lists make this CPU-bound, so it runs in a worker thread.
    """
    try:
        kind, markdown = await asyncio.to_thread(describe_payload, req.payload)
        return FormatResponse(kind=kind, markdown=markdown)
    except Exception as e:
        logger.error("Formatter worker failed: %s", e)
        return JSONResponse(
            status_code=503,
            content={"detail": f"Service unavailable or error: {str(e)}"}
        )
