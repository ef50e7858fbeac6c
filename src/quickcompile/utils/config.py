import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "QUICKCOMPILE_CONFIG_DIR"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Directory for compiled binaries; empty means next to the source file
    "save_location": "",
    # Extra compiler arguments, space separated
    "cpp_args": "",
    "c_args": "",
    "python_args": "",
    "rust_args": "",
}


def _split_args(value: Any) -> List[str]:
    # Plain split keeps the [""] sentinel for an unset preference
    if isinstance(value, str):
        return value.split(" ")
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return []


@dataclass(frozen=True)
class Preferences:
    """Snapshot of user preferences taken once per compile request."""
    save_location: str = ""
    language_args: Mapping[str, List[str]] = field(default_factory=dict)

    def args_for(self, language: str) -> List[str]:
        return list(self.language_args.get(language, []))


class ConfigManager:
    """
    Loads and persists user preferences in ~/.quickcompile/config.json.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else Path.home() / ".quickcompile"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.json"
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = DEFAULT_CONFIG.copy()
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return config
        if isinstance(user_config, dict):
            config.update(user_config)
        return config

    def save_config(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        self.config[key] = value
        self.save_config()

    def preferences(self) -> Preferences:
        """Resolve every preference the compiler needs into one snapshot."""
        language_args = {
            key[: -len("_args")]: _split_args(value)
            for key, value in self.config.items()
            if key.endswith("_args")
        }
        return Preferences(
            save_location=self.get("save_location") or "",
            language_args=language_args,
        )
