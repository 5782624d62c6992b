from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import func
from vyeya.crud.base import CRUDBase
from vyeya.models.store import Store
from vyeya.schemas.store import StoreCreate


class CRUDStore(CRUDBase[Store, StoreCreate, StoreCreate]):
    def get_by_owner(self, db: Session, *, owner_id: str) -> List[Store]:
        return (
            db.query(Store)
            .filter(Store.owner_id == owner_id)
            .order_by(Store.created_at.desc())
            .all()
        )

    def count(self, db: Session) -> int:
        return db.query(func.count(Store.id)).scalar()

    def create_with_owner_id(self, db: Session, *, obj_in: StoreCreate, owner_id: str) -> Store:
        return self.create_with_owner(
            db, obj_in=obj_in, owner_field="owner_id", owner_id=owner_id
        )


store = CRUDStore(Store)
