# Routes package init
"""
Client Records Backend: API Routes Package
=============================================

Route Inventory:
    - records.py: GET/POST /test, GET/PUT/DELETE /test/{id}
    - health.py:  GET /health

Routes are thin: extract parameters, call the service, pick the status code.
"""
