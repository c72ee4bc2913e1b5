# Services package init
"""
Selerara Dashboard API — Services Layer
=========================================

What:  Query and shaping logic sitting between routes (HTTP) and the pool.

Service Inventory:
    - grouping:        Pure row → nested tree shaping for FAQs and the menu
    - CatalogService:  The fixed read queries, one coroutine per endpoint

Routes only pick a service method and a response model; services can be
tested with a mocked session and no HTTP.
"""
