# Services package init
"""
Client Records Backend: Services Layer
=========================================

Service Inventory:
    - ClientRecordService: one parameterized statement per CRUD operation
"""
