import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException

from src.api.dependencies import get_background_removal_gateway, get_config, request_content_length
from src.gateway.endpoint import GatewayEndpoint
from src.gateway.ingest import ingest_upload
from src.integrations.contracts.interfaces import GatewayFailure
from src.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)

REMOVE_BG_PATH = "/remove-bg"
IMAGE_FORM_FIELD = "image"

api = APIRouter()
background_removal_api = api


@api.post(REMOVE_BG_PATH, tags=["Background Removal"])
async def remove_background(
    request: Request,
    gateway: GatewayEndpoint = Depends(get_background_removal_gateway),
    config: GatewayConfig = Depends(get_config),
):
    """
    Relay one uploaded image to the background-removal provider.

    Expects a multipart body with the file in the ``image`` part. Returns
    {"processedImage": "data:image/png;base64,..."} on success and
    {"error": "..."} otherwise.
    """
    try:
        form = await request.form()
    except HTTPException as e:
        logger.info("Unparsable upload body: %s", e.detail)
        form = FormData()

    image = form.get(IMAGE_FORM_FIELD)
    if not isinstance(image, UploadFile):
        # Plain form fields and urlencoded values count as a missing file
        image = None

    async def ingest():
        return await ingest_upload(
            image,
            max_bytes=config.upload.max_bytes,
            allowed_content_types=config.upload.allowed_content_types,
            content_length=request_content_length(request),
        )

    try:
        result = await gateway.handle(ingest)
    finally:
        await form.close()

    if isinstance(result, GatewayFailure):
        return JSONResponse(status_code=result.http_status, content={"error": result.message})
    return JSONResponse(status_code=result.http_status, content=result.payload)
