"""Admin account provisioning, run on startup and as the ``flashdeck-seed`` script."""

import logging
import sys

from flashdeck.config import Settings, configure_logging, get_settings
from flashdeck.core import container
from flashdeck.database import bound_session, get_session_factory

logger = logging.getLogger(__name__)


def seed_admin_user(settings: Settings) -> bool:
    """
    Upsert the admin user from ADMIN_EMAIL / ADMIN_PASSWORD.

    Returns:
        True if a user was created or updated, False if seeding is not configured
    """
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return False

    with get_session_factory(settings)() as session, bound_session(session):
        container.seed_admin_user_use_case().seed(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    return True


def main() -> None:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    if not seed_admin_user(settings):
        logger.error("ADMIN_EMAIL and ADMIN_PASSWORD must both be set")
        sys.exit(1)
    logger.info(f"Admin user {settings.ADMIN_EMAIL} is ready")


if __name__ == "__main__":
    main()
