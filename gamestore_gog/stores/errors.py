"""Errors a game store provider may surface to the host."""


class GameStoreError(Exception):
    """Base class for errors raised by game store providers"""


class GameEntryNotFound(GameStoreError):
    """A lookup by name or id matched no installed game.

    The host treats this as recoverable and falls through to the next
    registered store.
    """

    def __init__(self, query: str, store_id: str):
        super().__init__(f"{query} not found in {store_id}")
        self.query = query
        self.store_id = store_id


class GameStoreNotInstalled(GameStoreError):
    """The store's client could not be located on this machine"""

    def __init__(self, store_id: str, message: str = ""):
        super().__init__(message or f"{store_id} client not installed")
        self.store_id = store_id
