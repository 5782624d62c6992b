"""
Excepciones de dominio de Vyeya.

Cada excepción lleva el código HTTP con el que se responde al cliente; el
manejador registrado en `vyeya.main` las serializa como `{"error": mensaje}`.
"""
from typing import Optional


class VyeyaError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(VyeyaError):
    """Entrada mal formada o incompleta (400)."""
    status_code = 400


class AuthenticationError(VyeyaError):
    """Token ausente, inválido o expirado (401, o 403 si el token no verifica)."""
    status_code = 401


class AuthorizationError(VyeyaError):
    """Usuario autenticado sin permisos sobre el recurso (403)."""
    status_code = 403


class NotFoundError(VyeyaError):
    status_code = 404


class StoreError(VyeyaError):
    """Fallo de persistencia. El mensaje es genérico; la causa se registra en el log."""
    status_code = 500
