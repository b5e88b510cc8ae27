"""
user_directory.bootstrap
~~~~~~~~~~~~~~~~~~~~~~~~
Composition root. Builds the record store, then the service on top of it,
then registers the service.

Explicit arguments win over settings::

    from user_directory.bootstrap import bootstrap
    from user_directory.repositories import InMemoryUserRepository

    registry = bootstrap(repository=InMemoryUserRepository([]))
    registry.get("users").get_all()     # → []
"""

import logging

from django.core.exceptions import ImproperlyConfigured

from user_directory.conf import directory_settings
from user_directory.repositories import UserRepository
from user_directory.services import ServiceRegistry, UserService, service_registry

logger = logging.getLogger("user_directory.bootstrap")


def build_repository(repository_class: type[UserRepository] | None = None,
                     users: list | None = None) -> UserRepository:
    """Instantiate the record store from arguments, falling back to settings."""
    cls = repository_class or directory_settings.REPOSITORY
    if not (isinstance(cls, type) and issubclass(cls, UserRepository)):
        raise ImproperlyConfigured(
            f"{cls!r} is not a UserRepository subclass"
        )

    if users is not None:
        return cls(users)

    seed = directory_settings.USERS
    if seed is None:
        return cls()
    try:
        return cls(seed)
    except (TypeError, ValueError) as exc:
        raise ImproperlyConfigured(
            f"USER_DIRECTORY['USERS'] holds an invalid record: {exc}"
        ) from exc


def build_user_service(repository: UserRepository | None = None) -> UserService:
    return UserService(repository if repository is not None else build_repository())


def bootstrap(registry: ServiceRegistry | None = None,
              repository: UserRepository | None = None) -> ServiceRegistry:
    """Wire the user service into *registry* (the global one by default)."""
    if registry is None:
        registry = service_registry

    svc = build_user_service(repository)
    registry.register(svc)
    logger.info("User directory ready: %r", svc.repository)
    return registry
