from typing import Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from vyeya.core.errors import ValidationError
from vyeya.core.security import get_password_hash, verify_password
from vyeya.crud.base import CRUDBase
from vyeya.models.user import User, UserRole
from vyeya.schemas.user import UserCreate, ProfileUpdate
import logging

logger = logging.getLogger(__name__)


class CRUDUser(CRUDBase[User, UserCreate, ProfileUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    def create(self, db: Session, *, obj_in: UserCreate) -> User:
        """
        Crea un usuario guardando solo el hash de la contraseña.

        El email se guarda en minúsculas y el rol en su forma canónica.

        Raises:
            ValidationError: si el email ya está registrado (incluye el caso
                de dos registros simultáneos que chocan en el índice único).
        """
        db_obj = User(
            email=obj_in.email.strip().lower(),
            password=get_password_hash(obj_in.password),
            name=obj_in.name.strip(),
            role=UserRole(obj_in.role).value,
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"Registro duplicado para {db_obj.email}")
            raise ValidationError("User already exists")
        db.refresh(db_obj)
        logger.info(f"Usuario registrado: {db_obj.id} ({db_obj.role})")
        return db_obj

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        db_user = self.get_by_email(db, email=email)
        if not db_user:
            return None
        if not verify_password(password, db_user.password):
            return None
        return db_user

    def update_profile(self, db: Session, *, db_obj: User, obj_in: ProfileUpdate) -> User:
        # El perfil se reemplaza completo: campos omitidos quedan en None
        return self.update(
            db,
            db_obj=db_obj,
            obj_in={
                "name": obj_in.name.strip(),
                "bio": obj_in.bio,
                "phone": obj_in.phone,
                "location": obj_in.location,
            },
        )

    def get_grower(self, db: Session, *, id: str) -> Optional[User]:
        return (
            db.query(User)
            .filter(User.id == id, User.role == UserRole.grower.value)
            .first()
        )


user = CRUDUser(User)
