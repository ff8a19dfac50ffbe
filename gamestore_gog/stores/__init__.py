# Stores package
from .base import GameStore, GameStoreEntry, ExecInfo, RunOptions
from .errors import GameStoreError, GameEntryNotFound, GameStoreNotInstalled
from .manager import StoreManager
from .gog import GoGLauncher
