from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from vyeya.api import deps
from vyeya.crud import store
from vyeya.core.errors import NotFoundError
from vyeya.models.user import User
from vyeya.schemas.store import StoreCreate, StoreResponse, StoreList

router = APIRouter()


@router.get("", response_model=StoreList)
def list_stores(
    db: Session = Depends(deps.get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    owner_id: Optional[str] = Query(None, description="Filtrar por dueño"),
):
    """
    Listar tiendas, más recientes primero.
    """
    if owner_id:
        stores = store.get_by_owner(db, owner_id=owner_id)
        return StoreList(stores=stores, total=len(stores))

    stores = store.get_multi(db, skip=skip, limit=limit)
    return StoreList(stores=stores, total=store.count(db))


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(
    store_id: str,
    db: Session = Depends(deps.get_db),
):
    db_store = store.get(db, id=store_id)
    if not db_store:
        raise NotFoundError("Store not found")
    return db_store


@router.post("", response_model=StoreResponse, status_code=201)
def create_store(
    *,
    db: Session = Depends(deps.get_db),
    store_in: StoreCreate,
    current_user: User = Depends(deps.get_current_user),
):
    """
    Crear una tienda a nombre del usuario autenticado.

    Las tiendas nuevas se crean sin verificar (`verified=false`).
    """
    return store.create_with_owner_id(db, obj_in=store_in, owner_id=current_user.id)
