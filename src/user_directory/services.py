"""
user_directory.services
~~~~~~~~~~~~~~~~~~~~~~~
The retrieval service and the registry that holds wired services.

``UserService`` is the one place callers (a CLI, an HTTP handler, a test)
read users from. It receives its record store through the constructor; it
never looks one up on its own::

    from user_directory.repositories import InMemoryUserRepository
    from user_directory.services import UserService, service_registry

    service_registry.register(UserService(InMemoryUserRepository()))

    svc = service_registry.get("users")
    svc.get_all()

The registry only stores instances. Building them is the job of the
composition root (``user_directory.bootstrap``).
"""

import logging

from user_directory.repositories import UserRepository
from user_directory.schemas import UserOut

logger = logging.getLogger("user_directory.services")


# ── Base service ──────────────────────────────────────────────────────────

class DirectoryService:
    """
    Base class for registrable services.

    Override ``name`` to set the registry key.
    """
    name: str = ""

    def _default_name(self) -> str:
        n = type(self).__name__
        return n.replace("Service", "").lower() or n.lower()

    def get_name(self) -> str:
        return self.name or self._default_name()

    def __repr__(self) -> str:
        return f"<Service {self.get_name()!r}>"


# ── Retrieval service ─────────────────────────────────────────────────────

class UserService(DirectoryService):
    """Read access to user records, delegated to a ``UserRepository``."""

    name = "users"

    def __init__(self, repository: UserRepository):
        self._repository = repository

    @property
    def repository(self) -> UserRepository:
        return self._repository

    def get_all(self) -> list[UserOut]:
        """Return every user, exactly as the repository lists them."""
        users = self._repository.list_all()
        logger.debug("get_all returned %d users", len(users))
        return users


# ── Registry ──────────────────────────────────────────────────────────────

class ServiceRegistry:
    """Name → service instance map filled in by the composition root."""

    def __init__(self):
        self._services: dict[str, DirectoryService] = {}

    def register(self, service: DirectoryService) -> "ServiceRegistry":
        """Register a service instance under its name. Replaces any previous one."""
        key = service.get_name()
        if key in self._services:
            logger.warning("Service '%s' re-registered, replacing %r", key, self._services[key])
        self._services[key] = service
        logger.info("Service '%s' registered", key)
        return self

    def unregister(self, name: str) -> None:
        """Remove a service by name."""
        self._services.pop(name, None)

    def get(self, name: str) -> DirectoryService:
        """
        Retrieve a service by name.

        Raises KeyError if the service is not registered.
        """
        svc = self._services.get(name)
        if svc is None:
            raise KeyError(
                f"Service '{name}' is not registered. "
                f"Available: {list(self._services.keys())}"
            )
        return svc

    @property
    def all(self) -> dict[str, DirectoryService]:
        return dict(self._services)

    def __contains__(self, name: object) -> bool:
        return name in self._services

    def __len__(self) -> int:
        return len(self._services)

    def __repr__(self) -> str:
        keys = ", ".join(self._services.keys())
        return f"<ServiceRegistry [{keys}]>"


# ── Global singleton ──────────────────────────────────────────────────────
service_registry = ServiceRegistry()
