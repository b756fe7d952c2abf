"""
Config file loading for wintuner.

Reads ~/.config/wintuner/config.toml and returns structured config.
Never raises — always returns a valid dict with sensible defaults.

Example:

    tweaks = ["show_file_extensions", "disable_bing_search"]
    apps = ["Git.Git", "VideoLAN.VLC"]
    install_timeout = 900
"""

from pathlib import Path

_CONFIG_PATH = Path.home() / ".config" / "wintuner" / "config.toml"


def _defaults() -> dict:
    return {"tweaks": [], "apps": [], "install_timeout": None}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return wintuner config from TOML file.

    Returns {"tweaks": list[str], "apps": list[str], "install_timeout": float | None}.
    Missing file or parse errors return all defaults; a key with a bad
    shape falls back to its own default without affecting the others.
    """
    config_path = path or _CONFIG_PATH
    config = _defaults()

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError):
        return config

    for key in ("tweaks", "apps"):
        value = data.get(key)
        if isinstance(value, list):
            config[key] = [str(item) for item in value]

    timeout = data.get("install_timeout")
    # bool is an int subclass; reject it explicitly
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        config["install_timeout"] = float(timeout)

    return config
