from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from vyeya.api import deps
from vyeya.crud import user
from vyeya.schemas.user import (
    AuthResponse,
    GrowerEnvelope,
    ProfileUpdate,
    UserCreate,
    UserEnvelope,
    UserLogin,
)
from vyeya.models.user import User
from vyeya.core.security import create_access_token
from vyeya.core.errors import AuthenticationError, NotFoundError, ValidationError

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCreate,
):
    """
    Registrar un nuevo usuario y devolver su token de acceso.

    Args:
        `db`: Sesión de base de datos
        `user_in`: Email, contraseña, nombre y rol opcional (buyer por defecto)

    Returns:
        `AuthResponse`: Token JWT y datos públicos del usuario

    Raises:
        `ValidationError`: 400 si ya existe un usuario con el mismo email
    """
    existing_user = user.get_by_email(db, email=user_in.email)
    if existing_user:
        raise ValidationError("User already exists")

    created_user = user.create(db, obj_in=user_in)
    token = create_access_token(created_user.id)
    return {"token": token, "user": created_user}


@router.post("/login", response_model=AuthResponse)
def login(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserLogin,
):
    """
    Iniciar sesión y obtener token de acceso JWT.

    Args:
        `db`: Sesión de base de datos
        `user_in`: Credenciales de login (email y password)

    Returns:
        `AuthResponse`: Token JWT y datos públicos del usuario

    Raises:
        `AuthenticationError`: 401 si las credenciales son incorrectas
    """
    authenticated_user = user.authenticate(
        db, email=user_in.email, password=user_in.password
    )
    if not authenticated_user:
        raise AuthenticationError("Invalid credentials")

    token = create_access_token(authenticated_user.id)
    return {"token": token, "user": authenticated_user}


@router.get("/me", response_model=UserEnvelope)
def read_user_me(
    current_user: User = Depends(deps.get_current_user),
):
    """
    Obtener información del usuario autenticado actual.
    """
    return {"user": current_user}


@router.put("/profile", response_model=UserEnvelope)
def update_profile(
    *,
    db: Session = Depends(deps.get_db),
    profile_in: ProfileUpdate,
    current_user: User = Depends(deps.get_current_user),
):
    """
    Actualizar el perfil del usuario autenticado.

    Args:
        `profile_in`: Nombre (obligatorio), bio, teléfono y ubicación

    Returns:
        `UserEnvelope`: Usuario con los datos actualizados

    Raises:
        `ValidationError`: 400 si el nombre está vacío
    """
    if not profile_in.name or not profile_in.name.strip():
        raise ValidationError("Name is required")

    updated_user = user.update_profile(db, db_obj=current_user, obj_in=profile_in)
    return {"user": updated_user}


@router.get("/grower/{grower_id}", response_model=GrowerEnvelope)
def read_grower(
    grower_id: str,
    db: Session = Depends(deps.get_db),
):
    """
    Perfil público de un productor (usuario con rol `grower`).

    Raises:
        `NotFoundError`: 404 si no existe o no es productor
    """
    grower = user.get_grower(db, id=grower_id)
    if not grower:
        raise NotFoundError("Grower not found")
    return {"grower": grower}
