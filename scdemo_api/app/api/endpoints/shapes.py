"""Shape endpoint: lists the sample shapes with their areas."""

from typing import List

from fastapi import APIRouter

from scdemo_api.app.schemas.common import CommonResponse
from scdemo_api.app.schemas.shape import ShapeRead
from scdemo_api.app.services.shape_service import ShapeService

router = APIRouter()


@router.get("", response_model=CommonResponse[List[ShapeRead]])
async def list_shapes() -> CommonResponse[List[ShapeRead]]:
    shapes = [ShapeRead(name=shape.name, area=shape.area()) for shape in ShapeService.get_shapes()]
    return CommonResponse(payload=shapes)
