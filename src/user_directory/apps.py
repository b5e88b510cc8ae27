"""
user_directory.apps
~~~~~~~~~~~~~~~~~~~
Django AppConfig that validates settings and wires the user service into the
global registry on startup.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger("user_directory.startup")


class UserDirectoryConfig(AppConfig):
    name = "user_directory"
    verbose_name = "User Directory"

    def ready(self):
        from user_directory.bootstrap import bootstrap
        from user_directory.conf import directory_settings

        try:
            directory_settings.validate()
            bootstrap()
        except Exception:
            logger.exception("Failed to wire the user directory")
            raise

        logger.info("user-directory ready")
