from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
from vyeya.crud.base import CRUDBase
from vyeya.models.product import Product
from vyeya.schemas.product import ProductCreate, ProductUpdate


class CRUDProduct(CRUDBase[Product, ProductCreate, ProductUpdate]):
    def _filtered(self, query, *, category: Optional[str], grower_id: Optional[str]):
        if category:
            query = query.filter(Product.category == category)
        if grower_id:
            query = query.filter(Product.grower_id == grower_id)
        return query

    def get_by_filters(
        self,
        db: Session,
        *,
        category: Optional[str] = None,
        grower_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Product]:
        query = self._filtered(db.query(Product), category=category, grower_id=grower_id)
        return (
            query.order_by(Product.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_by_filters(
        self,
        db: Session,
        *,
        category: Optional[str] = None,
        grower_id: Optional[str] = None
    ) -> int:
        query = self._filtered(
            db.query(func.count(Product.id)), category=category, grower_id=grower_id
        )
        return query.scalar()

    def create_with_grower(
        self, db: Session, *, obj_in: ProductCreate, grower_id: str
    ) -> Product:
        return self.create_with_owner(
            db, obj_in=obj_in, owner_field="grower_id", owner_id=grower_id
        )


product = CRUDProduct(Product)
