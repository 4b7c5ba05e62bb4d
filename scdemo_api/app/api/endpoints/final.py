"""Final echo endpoint: returns the posted name and age."""

import logging

from fastapi import APIRouter

from scdemo_api.app.schemas.common import CommonResponse
from scdemo_api.app.schemas.final import FinalRequest, FinalResponse
from scdemo_api.app.services.final_service import FinalService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/test", response_model=CommonResponse[FinalResponse])
async def test(final_request: FinalRequest) -> CommonResponse[FinalResponse]:
    logger.info("Test method called")
    return CommonResponse(payload=FinalService.call(final_request.to_final_class()))
