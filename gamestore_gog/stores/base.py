"""
Base GameStore class defining the interface a host expects from a game store provider.

A provider knows how to find the games installed through one distribution
client (GOG Galaxy, ...) and how to ask that client to start one of them.
"""
import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameStoreEntry:
    """Represents one installed game as reported by a store"""
    appid: str
    name: str
    game_path: str
    game_store_id: str

    def to_dict(self) -> Dict[str, Any]:
        # Field names the host uses
        return {
            'appid': self.appid,
            'name': self.name,
            'gamePath': self.game_path,
            'gameStoreId': self.game_store_id,
        }


@dataclass(frozen=True)
class ExecInfo:
    """How to invoke a store client so that it launches one game"""
    exec_path: str
    arguments: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RunOptions:
    """Options handed to the host's process runner"""
    cwd: Optional[str] = None
    shell: bool = False
    suggest_deploy: bool = False


AppIdQuery = Union[str, Iterable[str]]
IdentifyFallback = Callable[[str], Union[bool, Awaitable[bool]]]


async def maybe_await(result):
    """Await the result if the caller handed back an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


class GameStore(ABC):
    """
    Abstract base class for game store providers.

    Lookups never fail because the client is missing or the OS refused access;
    they fail only with GameEntryNotFound or GameStoreNotInstalled so the host
    can move on to the next store.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the store identifier (e.g. 'gog')"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the human readable store name"""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """Ordering hint among stores, lower values are preferred"""
        pass

    @abstractmethod
    async def all_games(self) -> List[GameStoreEntry]:
        """
        Get every game currently installed through this store.

        Returns:
            List of GameStoreEntry objects, possibly empty.
        """
        pass

    @abstractmethod
    async def reload_games(self) -> None:
        """Forget the cached game list so the next lookup re-enumerates."""
        pass

    @abstractmethod
    async def find_by_name(self, name_pattern: str) -> GameStoreEntry:
        """
        Find the first game whose whole name matches a regular expression.

        Args:
            name_pattern: Pattern matched against the full game name.

        Returns:
            The first matching entry.

        Raises:
            GameEntryNotFound: No game matched.
        """
        pass

    @abstractmethod
    async def find_by_app_id(self, app_id: AppIdQuery) -> GameStoreEntry:
        """
        Find the first game with the given id, or with one of the given ids.

        Args:
            app_id: A single store id or a collection of store ids.

        Returns:
            The first matching entry.

        Raises:
            GameEntryNotFound: No game matched.
        """
        pass

    @abstractmethod
    async def get_exec_info(self, app_id: str) -> ExecInfo:
        """
        Build the client invocation that launches a game.

        Raises:
            GameEntryNotFound: The id is not installed.
            GameStoreNotInstalled: The client could not be located.
        """
        pass

    @abstractmethod
    async def launch_game(self, app_id: str, api: Any) -> Any:
        """Launch a game through the host's process runner."""
        pass

    @abstractmethod
    async def get_game_store_path(self) -> Optional[str]:
        """Path of the store client's executable, or None if not installed."""
        pass

    async def identify_game(self, game_path: str, fallback: IdentifyFallback) -> bool:
        """
        Confirm whether a directory holds a game from this store.

        Default implementation defers to the host's fallback check.
        """
        return bool(await maybe_await(fallback(game_path)))
