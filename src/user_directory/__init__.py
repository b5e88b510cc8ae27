"""
user_directory — read-only user records behind a repository and a service.

    pip install django-user-directory

Basic usage::

    from user_directory import InMemoryUserRepository, UserService

    svc = UserService(InMemoryUserRepository())
    svc.get_all()    # → [UserOut(id=1, name='Alice', ...), UserOut(id=2, name='Bob', ...)]

Inside a Django project, add ``"user_directory"`` to ``INSTALLED_APPS`` and
read the wired service from the registry::

    from user_directory import service_registry

    service_registry.get("users").get_all()
"""

__version__ = "0.1.0"

# ── Data model ────────────────────────────────────────────────────────────
from user_directory.schemas import UserOut

# ── Record store ──────────────────────────────────────────────────────────
from user_directory.repositories import (
    DEFAULT_USERS,
    InMemoryUserRepository,
    UserRepository,
)

# ── Services ──────────────────────────────────────────────────────────────
from user_directory.services import (
    DirectoryService,
    ServiceRegistry,
    UserService,
    service_registry,
)

# ── Composition root ──────────────────────────────────────────────────────
from user_directory.bootstrap import bootstrap, build_repository, build_user_service

__all__ = [
    "UserOut",
    "DEFAULT_USERS", "InMemoryUserRepository", "UserRepository",
    "DirectoryService", "ServiceRegistry", "UserService", "service_registry",
    "bootstrap", "build_repository", "build_user_service",
]
