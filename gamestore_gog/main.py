"""Entry point the host calls to load the GOG store provider."""
import logging

from .stores.gog import GoGLauncher

logger = logging.getLogger(__name__)


def main(context) -> bool:
    """Register the GOG store with the host context.

    Args:
        context: Host object exposing register_game_store(store)

    Returns:
        True once the store is registered
    """
    instance = GoGLauncher()
    context.register_game_store(instance)
    logger.info("GOG store provider loaded")
    return True
