# GOG Galaxy game store provider
# Discovers games installed through GOG Galaxy and launches them through the client.

from .stores import (
    GameStore,
    GameStoreEntry,
    ExecInfo,
    RunOptions,
    GameStoreError,
    GameEntryNotFound,
    GameStoreNotInstalled,
    StoreManager,
    GoGLauncher,
)
from .main import main

__version__ = "0.1.0"
