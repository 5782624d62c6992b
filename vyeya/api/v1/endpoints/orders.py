from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from vyeya.api import deps
from vyeya.crud import order
from vyeya.core.errors import AuthorizationError, NotFoundError, StoreError
from vyeya.schemas.order import (
    OrderCreate,
    OrderDetailEnvelope,
    OrderEnvelope,
    OrderItemResponse,
    OrderList,
    OrderResponse,
    OrderWithItems,
)
from vyeya.models.user import User
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=OrderEnvelope, status_code=201)
def create_order(
    *,
    db: Session = Depends(deps.get_db),
    order_in: OrderCreate,
    current_user: User = Depends(deps.get_current_user),
):
    """
    Crear una nueva orden de compra con sus líneas.

    El total y los precios los envía el cliente y se guardan tal cual.

    Args:
        `db`: Sesión de base de datos
        `order_in`: Líneas (`productId`, `quantity`, `price`) y `totalAmount`
        `current_user`: Usuario autenticado que realiza la orden

    Returns:
        `OrderEnvelope`: Orden creada en estado `pending`

    Raises:
        `ValidationError`: 400 si no hay líneas o el total no es positivo
        `StoreError`: 500 si falla la transacción
    """
    try:
        created_order = order.create_with_items(
            db, obj_in=order_in, user_id=current_user.id
        )
    except SQLAlchemyError:
        logger.exception("Error creando la orden")
        raise StoreError("Failed to create order")

    return {"order": created_order}


@router.get("", response_model=OrderList)
def list_user_orders(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Obtener todas las órdenes del usuario autenticado, más recientes primero.
    """
    try:
        orders = order.get_by_user(db, user_id=current_user.id)
    except SQLAlchemyError:
        logger.exception("Error consultando órdenes")
        raise StoreError("Failed to fetch orders")

    return OrderList(orders=orders)


@router.get("/{order_id}", response_model=OrderDetailEnvelope)
def get_order(
    order_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Obtener una orden específica con sus líneas.

    Args:
        `order_id`: ID de la orden a buscar
        `db`: Sesión de base de datos
        `current_user`: Usuario autenticado actual

    Returns:
        `OrderDetailEnvelope`: Orden con sus líneas y el nombre actual de cada producto

    Raises:
        `NotFoundError`: 404 si la orden no existe
        `AuthorizationError`: 403 si la orden no pertenece al usuario
    """
    try:
        db_order = order.get(db, id=order_id)
        if not db_order:
            raise NotFoundError("Order not found")

        if db_order.user_id != current_user.id:
            raise AuthorizationError("Access denied")

        items = [
            OrderItemResponse.model_validate(item).model_copy(
                update={"product_name": product_name}
            )
            for item, product_name in order.get_items(db, order_id=order_id)
        ]
    except SQLAlchemyError:
        logger.exception("Error consultando la orden")
        raise StoreError("Failed to fetch order")

    return {
        "order": OrderWithItems(
            **OrderResponse.model_validate(db_order).model_dump(), items=items
        )
    }
