from .user import user
from .order import order
from .product import product
from .store import store
