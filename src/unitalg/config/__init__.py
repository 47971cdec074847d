from unitalg.config.logging import configure_logging, ensure_logging
from unitalg.config.settings import UnitsSettings

__all__ = ["UnitsSettings", "configure_logging", "ensure_logging"]
