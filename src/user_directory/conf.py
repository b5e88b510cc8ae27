"""
user_directory.conf
~~~~~~~~~~~~~~~~~~~
Settings proxy with safe defaults and lazy loading.

Configure via ``settings.USER_DIRECTORY`` (all keys optional, the defaults
serve the two built-in users)::

    USER_DIRECTORY = {
        # Record store class, any UserRepository subclass
        "REPOSITORY": "user_directory.repositories.InMemoryUserRepository",

        # Seed records; None serves DEFAULT_USERS
        "USERS": [
            {"id": 1, "name": "Alice", "email": "alice@example.com"},
        ],
    }

``REPOSITORY`` is imported once and cached until ``reload()``. ``USERS`` is
read on every access, but the store copies it when the composition root
builds it, so later changes do not reach an already-built store.
"""

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string


DEFAULTS = {
    "REPOSITORY": "user_directory.repositories.InMemoryUserRepository",
    "USERS":      None,
}


class DirectorySettings:
    """Lazy proxy around USER_DIRECTORY that falls back to built-in defaults."""

    _cache: dict = {}

    def _user_config(self) -> dict:
        from django.conf import settings
        cfg = getattr(settings, "USER_DIRECTORY", None) or {}
        if not isinstance(cfg, dict):
            raise ImproperlyConfigured(
                f"USER_DIRECTORY must be a dict, got {type(cfg).__name__}"
            )
        return cfg

    def _resolve(self, key: str):
        if key not in self._cache:
            dotted = self._user_config().get(key) or DEFAULTS[key]
            if not isinstance(dotted, str):
                raise ImproperlyConfigured(
                    f"USER_DIRECTORY[{key!r}] must be a dotted path string, got {dotted!r}"
                )
            try:
                self._cache[key] = import_string(dotted)
            except ImportError as exc:
                raise ImproperlyConfigured(
                    f"USER_DIRECTORY[{key!r}] = {dotted!r} could not be imported: {exc}"
                ) from exc
        return self._cache[key]

    def get(self, key: str, default=None):
        """Return raw (non-import) setting value by key."""
        return self._user_config().get(key, DEFAULTS.get(key, default))

    @property
    def REPOSITORY(self): return self._resolve("REPOSITORY")
    @property
    def USERS(self):      return self.get("USERS")

    def validate(self) -> None:
        """Raise ImproperlyConfigured if USER_DIRECTORY is malformed."""
        from django.conf import settings
        cfg = getattr(settings, "USER_DIRECTORY", None)
        if cfg is None:
            return
        if not isinstance(cfg, dict):
            raise ImproperlyConfigured(
                f"USER_DIRECTORY must be a dict, got {type(cfg).__name__}"
            )
        unknown = set(cfg) - DEFAULTS.keys()
        if unknown:
            raise ImproperlyConfigured(
                f"USER_DIRECTORY has unknown keys: {sorted(unknown)}. "
                f"Allowed: {sorted(DEFAULTS)}"
            )
        repository = cfg.get("REPOSITORY")
        if repository is not None and not isinstance(repository, str):
            raise ImproperlyConfigured(
                f"USER_DIRECTORY['REPOSITORY'] must be a dotted path string, got {repository!r}"
            )
        users = cfg.get("USERS")
        if users is not None and not isinstance(users, list):
            raise ImproperlyConfigured("USER_DIRECTORY['USERS'] must be a list or None")

    def reload(self):
        """Clear the import cache. Call after overriding settings in tests."""
        self._cache.clear()


directory_settings = DirectorySettings()
