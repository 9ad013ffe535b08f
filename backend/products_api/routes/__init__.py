# Routes package init
"""
Products API: API Routes Package
==================================

Route Inventory:
    - products.py:  GET    /api/products         (list all)
                    GET    /api/products/{id}    (get one)
                    POST   /api/products         (create)
                    PUT    /api/products/{id}    (replace name/price)
                    DELETE /api/products/{id}    (delete)
    - health.py:    GET    /health               (service health check)

Routes stay thin: read the request, call ProductService, set status code
and headers.
"""
