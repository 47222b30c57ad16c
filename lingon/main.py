from __future__ import annotations

from typing import Optional

from .core.config import Settings, get_settings
from .core.logging_config import get_logger, setup_logging
from .infra.resources import Owner
from .lingon import Lingon

log = get_logger(__name__)


def make_lingon(settings: Optional[Settings] = None, owner: Optional[Owner] = None) -> Lingon:
    """Build a ``Lingon`` from settings, configuring logging first.

    ``owner`` overrides ``LINGON_OWNER``; with neither set no bundled files
    are imported.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    if owner is None and settings.LINGON_OWNER:
        owner = settings.LINGON_OWNER

    log.debug("Using language root %s", settings.LINGON_ROOT)
    return Lingon(owner, settings.LINGON_ROOT, settings.LINGON_DEFAULT_LOCALE)
