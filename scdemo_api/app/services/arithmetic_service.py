"""Small arithmetic helpers used by the unit-test demos."""

import logging

logger = logging.getLogger(__name__)


class ArithmeticService:
    @staticmethod
    def add(a: int, b: int) -> int:
        return a + b

    @staticmethod
    def subtract(a: int, b: int) -> int:
        return a - b


class NumberProvider:
    def get_number(self) -> int:
        logger.info("Returning number 1")
        return 1

    def raise_error(self) -> None:
        raise RuntimeError("This is a runtime exception")
