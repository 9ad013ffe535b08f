"""
Products API: Application Package Initializer
===============================================

What: Marks the `products_api` directory as a Python package.
Who:  Used by uvicorn (`products_api.main:app`), pytest, and the store modules.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs and status codes
    ├─────────────────────────────────────┤
    │         Services (Adapters)         │  ← store results → responses
    ├─────────────────────────────────────┤
    │     Stores (Record Ownership)       │  ← in-memory or SQLAlchemy
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← ORM rows + Pydantic contracts
    └─────────────────────────────────────┘

    Every store honors the same five-operation contract defined in
    `products_api.store.base.ProductStore`.
"""

__version__ = "1.0.0"
