# Services package init
"""
Products API: Services Layer
==============================

Service Inventory:
    - ProductService: input rules and store-result → response conversion for
      the product routes. Stateless; the store is passed into every call.
"""
