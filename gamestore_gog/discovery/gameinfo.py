"""
Per-game metadata written by GOG Galaxy on macOS.

Galaxy keeps one directory per installed game under
~/Library/Application Support/GOG.com/Galaxy/games/<id>/ and a JSON
`gameinfo` file inside it. Only the fields needed to build a GameStoreEntry
are read; everything else is ignored.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional


class GameInfoParseError(ValueError):
    """A gameinfo file could not be turned into a GalaxyGameInfo"""


def _optional_str(record: Dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise GameInfoParseError(f"'{key}' must be a string, got {type(value).__name__}")
    # Galaxy sometimes writes numeric ids
    return str(value)


@dataclass(frozen=True)
class GalaxyGameInfo:
    """
    Parsed gameinfo record.

    Fallback rules:
    - appid: the record's gameId, else the name of the game's directory
    - display_name: name, else title, else "GOG Game <appid>"
    - install_directory: installDirectory, or None when missing/empty
    """
    dir_name: str
    game_id: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    install_directory: Optional[str] = None

    @property
    def appid(self) -> str:
        return self.game_id or self.dir_name

    @property
    def display_name(self) -> str:
        return self.name or self.title or f"GOG Game {self.appid}"

    @classmethod
    def from_json(cls, dir_name: str, data: str) -> "GalaxyGameInfo":
        """
        Parse the text of a gameinfo file.

        Args:
            dir_name: Name of the directory the file was found in
            data: Raw file contents

        Raises:
            GameInfoParseError: Not JSON, not an object, or a field has the wrong type
        """
        try:
            record = json.loads(data)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integers and runaway nesting alike
            raise GameInfoParseError(f"invalid JSON: {e}") from e
        if not isinstance(record, dict):
            raise GameInfoParseError(f"expected an object, got {type(record).__name__}")

        return cls(
            dir_name=dir_name,
            game_id=_optional_str(record, "gameId") or None,
            name=_optional_str(record, "name") or None,
            title=_optional_str(record, "title") or None,
            install_directory=_optional_str(record, "installDirectory") or None,
        )
