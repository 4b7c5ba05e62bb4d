"""
Upload endpoint.

Accepts one or more files in the multipart field ``data`` and logs
their metadata.  File contents are not stored.
"""

import logging
from typing import List

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import PlainTextResponse

from scdemo_api.app.core.text import remove_unrecognized_chars

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_class=PlainTextResponse)
async def upload(request: Request, data: List[UploadFile] = File(...)) -> str:
    logger.info("headers: %s", dict(request.headers))
    for file in data:
        logger.info("File name: %s", remove_unrecognized_chars(file.filename or ""))
        logger.info("File size: %s", file.size)
        logger.info("File content type: %s", file.content_type)
    return ""
