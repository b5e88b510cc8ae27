import pytest


def pytest_configure(config):
    from django.conf import settings
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "user_directory",
            ],
            MIDDLEWARE=[],
            USE_TZ=True,
        )


@pytest.fixture(autouse=True)
def isolated_directory():
    """Drop cached settings imports and restore the global registry after each test."""
    from user_directory.conf import directory_settings
    from user_directory.services import service_registry

    directory_settings.reload()
    before = service_registry.all
    yield
    directory_settings.reload()
    for name in list(service_registry.all):
        service_registry.unregister(name)
    for svc in before.values():
        service_registry.register(svc)
