"""
Selerara Dashboard API — Application Package Initializer
=========================================================

What: Marks `selerara_api` as a Python package.
Who:  Imported by uvicorn (`selerara_api.main:app`), pytest and the CLI entry point.

Architecture Note:
    The service is a read-only layer over the restaurant dashboard database:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Queries & Row Shaping)  │  ← Fixed SQL, grouping
    ├─────────────────────────────────────┤
    │          Schemas (Records)          │  ← Pydantic response models
    ├─────────────────────────────────────┤
    │        Database (Connection Pool)   │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    Routes never build SQL; services never know about HTTP status codes.
    Errors travel as exceptions and are turned into responses in one place
    (see main.register_exception_handlers).
"""

__version__ = "1.0.0"
