from typing import List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from vyeya.core.errors import ValidationError
from vyeya.crud.base import CRUDBase
from vyeya.models.order import Order, OrderItem, OrderStatus
from vyeya.models.product import Product
from vyeya.schemas.order import OrderCreate
import logging

logger = logging.getLogger(__name__)


class CRUDOrder(CRUDBase[Order, OrderCreate, OrderCreate]):
    def get_by_user(self, db: Session, *, user_id: str) -> List[Order]:
        """
        Órdenes del usuario, de la más reciente a la más antigua (sin paginar).
        """
        return (
            db.query(Order)
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc())
            .all()
        )

    def get_items(
        self, db: Session, *, order_id: str
    ) -> List[Tuple[OrderItem, Optional[str]]]:
        """
        Líneas de una orden junto con el nombre actual de cada producto.

        El precio es el registrado al comprar; el nombre se lee en vivo y es
        None si el producto ya no existe.
        """
        return (
            db.query(OrderItem, Product.name)
            .outerjoin(Product, Product.id == OrderItem.product_id)
            .filter(OrderItem.order_id == order_id)
            .all()
        )

    def validate_new(self, obj_in: OrderCreate) -> None:
        if not obj_in.items:
            raise ValidationError("Order items are required")
        if obj_in.total_amount is None or obj_in.total_amount <= 0:
            raise ValidationError("Valid total amount is required")

    def create_with_items(
        self, db: Session, *, obj_in: OrderCreate, user_id: str
    ) -> Order:
        """
        Crea una orden y todas sus líneas en una sola transacción.

        Args:
            db: Sesión de base de datos
            obj_in: Líneas de la orden y monto total enviados por el cliente
            user_id: ID del comprador autenticado

        Returns:
            `Order` persistida en estado `pending` (sin sus líneas)

        Raises:
            ValidationError: si no hay líneas o el total no es positivo;
                en ese caso no se toca la base de datos.
            SQLAlchemyError: si falla la inserción. Se hace rollback y se
                propaga el error original.
        """
        self.validate_new(obj_in)

        try:
            db_obj = Order(
                user_id=user_id,
                total_amount=obj_in.total_amount,
                status=OrderStatus.pending.value,
            )
            db.add(db_obj)
            db.flush()

            for item in obj_in.items:
                db.add(
                    OrderItem(
                        order_id=db_obj.id,
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price=item.price,
                    )
                )
            db.flush()
            db.commit()
        except Exception:
            try:
                db.rollback()
            except SQLAlchemyError:
                logger.exception("Error en rollback de la orden")
            raise

        db.refresh(db_obj)
        logger.info(f"Orden {db_obj.id} creada con {len(obj_in.items)} líneas")
        return db_obj


order = CRUDOrder(Order)
