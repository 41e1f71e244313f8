"""Infrastructure providers."""

# Import bases
from .auth import AuthProvider
from .notifier import NotifierProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .auth import ProdAuthProvider  # noqa: F401
from .notifier import ProdNotifierProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AuthProvider",
    "NotifierProvider",
    "PersistenceProvider",
    "ProdAuthProvider",
    "ProdNotifierProvider",
    "ProdPersistenceProvider",
]
