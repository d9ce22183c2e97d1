import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from src.gateway.endpoint import GatewayEndpoint
from src.gateway.ingest import require_video_url
from src.api.dependencies import get_video_lookup_gateway
from src.integrations.contracts.interfaces import GatewayFailure

logger = logging.getLogger(__name__)

api = APIRouter()
video_lookup_api = api


@api.get("/download", tags=["Video Download"])
async def lookup_video(
    url: Optional[str] = Query(default=None, description="Page URL of the social media video"),
    gateway: GatewayEndpoint = Depends(get_video_lookup_gateway),
):
    """
    Relay a video page URL to the video-metadata provider and forward its JSON
    answer unchanged. Failures are plain text.
    """

    async def ingest():
        return require_video_url(url)

    result = await gateway.handle(ingest)
    if isinstance(result, GatewayFailure):
        if result.http_status == 400:
            return PlainTextResponse(result.message, status_code=400)
        return PlainTextResponse(f"Error occurred: {result.message}", status_code=result.http_status)

    logger.info("Video lookup succeeded for %s", url)
    return JSONResponse(status_code=result.http_status, content=result.payload)
