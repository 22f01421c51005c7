# Middleware package init
"""
Client Records Backend: Middleware Package
=============================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first, so the logging middleware can read it
    2. Logging measures everything downstream, CORS preflights included
    3. CORS answers preflight OPTIONS requests and adds the allow headers

JSON body parsing needs no middleware: FastAPI decodes bodies into the
Pydantic payload models declared on each route.
"""
