import logging
from typing import Optional

from signalhub.core.exceptions import ConfigurationError
from signalhub.settings import Settings, settings

HUB_LOGGER = "signalhub.core.hub"


def configure_logging(
    level: Optional[str] = None,
    strict: bool = False,
    project_settings: Optional[Settings] = None,
) -> int:
    """Configure root logging for a host application; returns the level used.

    Hub dispatch lines are DEBUG only. With ``trace_dispatch`` set they are
    shown regardless of the root level; otherwise the hub logger follows it.
    An unknown level falls back to INFO, or raises ``ConfigurationError``
    when ``strict`` is set.
    """
    project_settings = project_settings or settings
    if level is None:
        errors = project_settings.validate()
        if errors and strict:
            raise ConfigurationError(f"Configuration errors: {errors}")
        level = project_settings.log_level

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        if strict:
            raise ConfigurationError(f"Unknown log level '{level}'")
        numeric_level = logging.INFO

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        force=True,  # ensure we override any prior configuration
    )
    hub_logger = logging.getLogger(HUB_LOGGER)
    hub_logger.setLevel(logging.DEBUG if project_settings.trace_dispatch else logging.NOTSET)
    return numeric_level
