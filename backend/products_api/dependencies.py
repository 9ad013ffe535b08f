"""
Products API: FastAPI Dependencies
=====================================

What:  Resolves the ProductStore owned by the running application.
How:   The app factory (or lifespan) puts the store on `app.state.store`;
       routes receive it through `Depends(get_store)`.

Example usage in a route:
    @router.get("/products")
    async def list_products(store: ProductStore = Depends(get_store)):
        return await store.list_all()
"""

from fastapi import Request

from products_api.store.base import ProductStore


def get_store(request: Request) -> ProductStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Product store is not initialized; is the app lifespan running?")
    return store
