from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy.orm import Session
from vyeya.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un registro por ID.

        Args:
            db: Sesión de base de datos
            id: ID del registro (UUID en texto)

        Returns:
            Objeto del modelo o None si no existe
        """
        return db.query(self.model).filter(self.model.id == id).first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        return (
            db.query(self.model)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_with_owner(
        self, db: Session, *, obj_in: CreateSchemaType, owner_field: str, owner_id: str
    ) -> ModelType:
        """
        Crear un registro asignando su propietario (usuario autenticado).

        Args:
            db: Sesión de base de datos
            obj_in: Datos validados del registro
            owner_field: Columna que referencia al propietario
            owner_id: ID del usuario propietario

        Returns:
            Objeto creado
        """
        db_obj = self.model(**obj_in.model_dump(), **{owner_field: owner_id})
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar un registro existente.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto existente en la BD
            obj_in: Datos de actualización (schema o dict)

        Returns:
            Objeto actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: Any) -> Optional[ModelType]:
        """
        Eliminar un registro por ID.

        Args:
            db: Sesión de base de datos
            id: ID del registro a eliminar

        Returns:
            Objeto eliminado
        """
        obj = db.query(self.model).filter(self.model.id == id).first()
        if obj:
            db.delete(obj)
            db.commit()
        return obj
