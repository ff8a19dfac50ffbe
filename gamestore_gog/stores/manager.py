"""
Store Manager - hosts multiple game store providers.

Providers register themselves through register_game_store(). Lookups walk the
providers in priority order and fall through to the next one when a store
reports GameEntryNotFound, so one store's environment never blocks the others.
"""
import asyncio
import logging
import os
import shlex
import subprocess
from typing import Dict, List, Optional

from .base import AppIdQuery, GameStore, GameStoreEntry, RunOptions
from .errors import GameEntryNotFound


logger = logging.getLogger(__name__)


class StoreManager:
    """
    Manages registered game store providers.

    Doubles as the host context handed to a provider's main(): it accepts
    registrations and runs the executables providers ask for.
    """

    def __init__(self):
        self._stores: Dict[str, GameStore] = {}

    def register_game_store(self, store: GameStore):
        """Register a store provider."""
        self._stores[store.id] = store
        logger.info(f"[Stores] Registered store: {store.id} (priority {store.priority})")

    def get_store(self, store_id: str) -> Optional[GameStore]:
        """Get a specific store provider by id."""
        return self._stores.get(store_id)

    @property
    def stores(self) -> List[GameStore]:
        """All registered stores, preferred first."""
        return sorted(self._stores.values(), key=lambda store: store.priority)

    async def all_games(self) -> List[GameStoreEntry]:
        """
        Combined list of installed games from every store.

        A store that fails is logged and skipped.
        """
        games = []
        for store in self.stores:
            try:
                store_games = await store.all_games()
            except Exception as e:
                logger.error(f"[Stores] Error fetching games from {store.id}: {e}")
                continue
            games.extend(store_games)
            logger.info(f"[Stores] Fetched {len(store_games)} games from {store.id}")
        return games

    async def find_by_app_id(self, app_id: AppIdQuery) -> GameStoreEntry:
        """First match across stores, in priority order."""
        if not isinstance(app_id, str):
            # every store needs to see the ids, even from a one-shot iterator
            app_id = tuple(app_id)
        for store in self.stores:
            try:
                return await store.find_by_app_id(app_id)
            except GameEntryNotFound:
                continue
        query = app_id if isinstance(app_id, str) else ", ".join(app_id)
        raise GameEntryNotFound(query, "any store")

    async def find_by_name(self, name_pattern: str) -> GameStoreEntry:
        """First match across stores, in priority order."""
        for store in self.stores:
            try:
                return await store.find_by_name(name_pattern)
            except GameEntryNotFound:
                continue
        raise GameEntryNotFound(name_pattern, "any store")

    async def reload_games(self):
        for store in self.stores:
            await store.reload_games()

    async def run_executable(self, exec_path: str, args: List[str], options: RunOptions) -> int:
        """
        Start a process and wait for it to exit.

        Args:
            exec_path: Executable to run
            args: Argument list, passed in order
            options: Working directory and shell flag

        Returns:
            The process exit code
        """
        logger.info(f"[Stores] Running {exec_path} {' '.join(args)} (cwd={options.cwd})")
        if options.suggest_deploy:
            logger.info("[Stores] Deployment suggested after launch")

        argv = [exec_path, *args]
        if exec_path.endswith(".app") and os.path.isdir(exec_path):
            # macOS app bundles are directories and only start through open(1)
            argv = ["open", "-a", exec_path, "--args", *args]

        if options.shell:
            command = subprocess.list2cmdline(argv) if os.name == "nt" else shlex.join(argv)
            proc = await asyncio.create_subprocess_shell(command, cwd=options.cwd)
        else:
            proc = await asyncio.create_subprocess_exec(*argv, cwd=options.cwd)
        return await proc.wait()

