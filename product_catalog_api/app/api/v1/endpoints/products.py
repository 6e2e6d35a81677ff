"""
Product endpoints for API v1.

These routes expose CRUD operations on the product collection.  The
handlers do no business logic of their own: they call
``ProductService`` and translate its result values into HTTP.

* ``Ok`` becomes 200 with the value as body (204 for deletes).
* ``Created`` becomes 201 with a ``Location`` header pointing at the
  new product.
* ``NotFound`` becomes 404 with an empty body.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Request, Response, status

from product_catalog_api.app.api.deps import get_product_service
from product_catalog_api.app.schemas.product import Product, ProductCreate, ProductUpdate
from product_catalog_api.app.services.product_service import ProductService
from product_catalog_api.app.services.results import NotFound, ServiceResult

router = APIRouter()


def _render(result: ServiceResult) -> Union[Product, List[Product], Response]:
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return result.value


@router.get("", response_model=List[Product])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> Union[List[Product], Response]:
    """Return all products in the order they were created."""
    return _render(service.list_products())


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Union[Product, Response]:
    """Retrieve a single product by its ID."""
    return _render(service.get_product(product_id))


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product.

    The id is assigned by the server.  The ``Location`` header holds
    the absolute URL of the created product.
    """
    result = service.create_product(product_in.name, product_in.description, product_in.price)
    response.headers["Location"] = str(request.url_for("get_product", product_id=result.resource_id))
    return result.value


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
async def update_product(
    product_id: int,
    product_in: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Union[Product, Response]:
    """Replace an existing product.

    All fields are replaced; the id is kept.
    """
    result = service.update_product(product_id, product_in.name, product_in.description, product_in.price)
    return _render(result)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    result = service.delete_product(product_id)
    if isinstance(result, NotFound):
        return _render(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
