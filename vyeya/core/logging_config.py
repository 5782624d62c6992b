import logging

from vyeya.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """
    Configura el logging raíz de la aplicación.

    El nivel se toma de `settings.LOG_LEVEL` salvo que se indique otro.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
