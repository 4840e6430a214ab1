import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

CONFIG_PATH = Path.home() / ".terra_bases.json"
DEFAULT_HISTORY_PATH = Path.home() / ".terra_bases_history.jsonl"

ENV_MAPPING: Dict[str, str] = {
    "history": "TERRA_BASES_HISTORY",
    "history_path": "TERRA_BASES_HISTORY_PATH",
}
TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class BasesConfig:
    history: bool = False
    history_path: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "history": self.history,
            "history_path": self.history_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "BasesConfig":
        history = data.get("history", False)
        if isinstance(history, str):
            history = history.strip().lower() in TRUTHY
        return cls(
            history=bool(history),
            history_path=str(data.get("history_path", "") or ""),
        )

    def resolved_history_path(self) -> Path:
        return Path(self.history_path).expanduser() if self.history_path else DEFAULT_HISTORY_PATH


def _merge_env(cfg: BasesConfig) -> BasesConfig:
    flag = os.getenv(ENV_MAPPING["history"], "")
    if flag:
        cfg.history = flag.strip().lower() in TRUTHY
    path = os.getenv(ENV_MAPPING["history_path"], "")
    if path:
        cfg.history_path = path
    return cfg


def load_config(path: Optional[Path] = None) -> BasesConfig:
    """
    Read the JSON config file and overlay environment variables.

    A missing or malformed file yields the defaults; environment values win
    over anything stored in the file.
    """
    target = path or CONFIG_PATH
    config = BasesConfig()
    if target.exists():
        try:
            data = json.loads(target.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                config = BasesConfig.from_dict(data)
        except (OSError, ValueError):
            # Fall back to defaults/env if file malformed.
            config = BasesConfig()
    return _merge_env(config)


def save_config(config: BasesConfig, path: Optional[Path] = None) -> None:
    target = path or CONFIG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(config.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
