"""
Service layer abstraction.

Each service encapsulates the logic of one demo.  API handlers only
translate between HTTP and these services, so the services can be
exercised directly from tests.
"""
