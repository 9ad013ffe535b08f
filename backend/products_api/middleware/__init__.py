# Middleware package init
"""
Products API: Middleware Package
==================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    The request id is assigned first so the access log line of the
    logging middleware can carry it.
"""
