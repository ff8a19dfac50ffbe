"""
Windows registry access.

winreg only exists on Windows, so it is imported on first use. A missing key
or value raises FileNotFoundError; every other failure is some other OSError.
"""
import logging
from typing import List

logger = logging.getLogger(__name__)


class RegistryUnavailableError(OSError):
    """The registry cannot be accessed on this platform"""


def _winreg():
    try:
        import winreg
    except ImportError as e:
        raise RegistryUnavailableError(f"Windows registry not available: {e}") from e
    return winreg


def _hive(winreg, hive_name: str):
    try:
        return getattr(winreg, hive_name)
    except AttributeError:
        raise RegistryUnavailableError(f"Unknown registry hive: {hive_name}") from None


def get_value(hive_name: str, key_path: str, value_name: str):
    """
    Read one named value.

    Args:
        hive_name: Hive constant name, e.g. "HKEY_LOCAL_MACHINE"
        key_path: Backslash separated key path below the hive
        value_name: Name of the value to read

    Returns:
        The value's data

    Raises:
        FileNotFoundError: Key or value does not exist
        OSError: Any other registry failure
    """
    winreg = _winreg()
    with winreg.OpenKey(_hive(winreg, hive_name), key_path) as key:
        value, _value_type = winreg.QueryValueEx(key, value_name)
    return value


def enum_subkeys(hive_name: str, key_path: str) -> List[str]:
    """
    List the names of a key's immediate subkeys, in registry order.

    Raises:
        FileNotFoundError: Key does not exist
        OSError: Any other registry failure
    """
    winreg = _winreg()
    with winreg.OpenKey(_hive(winreg, hive_name), key_path) as key:
        count = winreg.QueryInfoKey(key)[0]
        names = [winreg.EnumKey(key, i) for i in range(count)]
    logger.debug(f"[Registry] {len(names)} subkeys under {key_path}")
    return names
