import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import BasesConfig, load_config
from .errors import DecodeError


def log_event(action: str, payload: Dict[str, Any], path: Path) -> None:
    """
    Append a simple JSON line to history for traceability.
    """
    record = {"action": action, **payload}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except Exception:
        # History failures should not break decoding.
        pass


def record_decode_failure(exc: DecodeError, config: Optional[BasesConfig] = None) -> None:
    """Log a failed decode to history when enabled; never raises."""
    try:
        cfg = config or load_config()
        if not cfg.history:
            return
        path = cfg.resolved_history_path()
    except Exception:
        # A broken config or history path only disables the trace.
        return
    log_event(
        action=f"{exc.codec}.decode",
        payload={"reason": exc.reason, "position": exc.position},
        path=path,
    )
