import logging

from ..database import save_instance

logger = logging.getLogger(__name__)


class Saveable:
    """Mixin for entities that persist themselves one row at a time."""

    def save(self) -> None:
        save_instance(self)
        logger.debug("Saved %r", self)
