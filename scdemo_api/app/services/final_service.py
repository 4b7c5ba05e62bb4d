"""Service behind the final echo endpoint."""

import logging

from scdemo_api.app.schemas.final import FinalClass, FinalResponse

logger = logging.getLogger(__name__)


class FinalService:
    @classmethod
    def call(cls, final_class: FinalClass) -> FinalResponse:
        logger.info("Call method called")
        logger.info("FinalClass: %s", final_class)
        return cls.convert(final_class)

    @classmethod
    def convert(cls, final_class: FinalClass) -> FinalResponse:
        return FinalResponse.of(final_class)
