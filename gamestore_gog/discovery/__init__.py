# Discovery package
from .gameinfo import GalaxyGameInfo, GameInfoParseError
from .platforms import (
    GalaxyPlatform,
    WindowsGalaxy,
    MacGalaxy,
    UnsupportedPlatform,
    select_platform,
)
from .registry import RegistryUnavailableError

__all__ = [
    'GalaxyGameInfo',
    'GameInfoParseError',
    'GalaxyPlatform',
    'WindowsGalaxy',
    'MacGalaxy',
    'UnsupportedPlatform',
    'select_platform',
    'RegistryUnavailableError',
]
