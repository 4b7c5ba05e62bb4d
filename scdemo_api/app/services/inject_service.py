"""
Dependency-wiring demo.

Three services where ``AService`` depends on ``BService`` and
``CService``, and ``BService`` depends on ``CService``.  All
collaborators are passed to the constructor; ``build_a_service``
composes the graph.
"""

import logging

logger = logging.getLogger(__name__)


class CService:
    def do_something(self) -> str:
        logger.info("CService.do_something")
        return "CService.doSomething"


class BService:
    def __init__(self, c_service: CService) -> None:
        self.c_service = c_service

    def do_something(self) -> str:
        logger.info("BService.do_something")
        self.c_service.do_something()
        return "BService.doSomething"


class AService:
    def __init__(self, c_service: CService, b_service: BService) -> None:
        self.c_service = c_service
        self.b_service = b_service

    def do_something(self) -> str:
        """Call C, then return whatever B answers."""
        logger.info("AService.do_something")
        self.c_service.do_something()
        return self.b_service.do_something()


def build_a_service() -> AService:
    c_service = CService()
    return AService(c_service=c_service, b_service=BService(c_service))
