from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from vyeya.api import deps
from vyeya.crud import product
from vyeya.core.errors import AuthorizationError, NotFoundError
from vyeya.models.product import Product
from vyeya.models.user import User, UserRole
from vyeya.schemas.product import ProductCreate, ProductResponse, ProductUpdate, ProductList

router = APIRouter()

SELLER_ROLES = (UserRole.grower.value, UserRole.admin.value)


def _get_owned_product(db: Session, product_id: str, current_user: User) -> Product:
    db_product = product.get(db, id=product_id)
    if not db_product:
        raise NotFoundError("Product not found")
    if db_product.grower_id != current_user.id and current_user.role != UserRole.admin.value:
        raise AuthorizationError("Access denied")
    return db_product


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    *,
    db: Session = Depends(deps.get_db),
    product_in: ProductCreate,
    current_user: User = Depends(deps.get_current_user),
):
    """
    Publicar un nuevo producto en el catálogo.

    El usuario autenticado queda como productor (`grower_id`) del producto.

    Raises:
        `AuthorizationError`: 403 si el usuario no es productor ni admin

    Example:
        ```json
        {
          "name": "Fresh Mangoes",
          "price": 5.99,
          "stock": 50,
          "category": "Fruits"
        }
        ```
    """
    if current_user.role not in SELLER_ROLES:
        raise AuthorizationError("Only growers can list products")

    return product.create_with_grower(db, obj_in=product_in, grower_id=current_user.id)


@router.get("", response_model=ProductList)
def list_products(
    db: Session = Depends(deps.get_db),
    skip: int = Query(0, ge=0, description="Número de productos a saltar para paginación"),
    limit: int = Query(100, ge=1, le=1000, description="Límite de productos por página"),
    category: Optional[str] = Query(None, description="Filtrar por categoría"),
    grower_id: Optional[str] = Query(None, description="Filtrar por productor"),
):
    """
    Listar productos, más recientes primero, con filtros opcionales.

    Example:
        ```
        GET /api/v1/products?category=Fruits&limit=20
        ```
    """
    products = product.get_by_filters(
        db=db, category=category, grower_id=grower_id, skip=skip, limit=limit
    )
    total = product.count_by_filters(db=db, category=category, grower_id=grower_id)

    return ProductList(products=products, total=total)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    db: Session = Depends(deps.get_db),
):
    db_product = product.get(db, id=product_id)
    if not db_product:
        raise NotFoundError("Product not found")
    return db_product


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    *,
    db: Session = Depends(deps.get_db),
    product_id: str,
    product_in: ProductUpdate,
    current_user: User = Depends(deps.get_current_user),
):
    """
    Actualizar un producto (solo campos presentes se modifican).

    Raises:
        `NotFoundError`: 404 si el producto no existe
        `AuthorizationError`: 403 si el usuario no es su productor ni admin
    """
    db_product = _get_owned_product(db, product_id, current_user)
    return product.update(db, db_obj=db_product, obj_in=product_in)


@router.delete("/{product_id}")
def delete_product(
    *,
    db: Session = Depends(deps.get_db),
    product_id: str,
    current_user: User = Depends(deps.get_current_user),
):
    _get_owned_product(db, product_id, current_user)
    product.delete(db, id=product_id)
    return {"message": "Product deleted"}
