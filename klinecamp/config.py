"""Game configuration loaded from JSON or JSONC.

Example (comments and trailing commas are accepted):

{
  // playback
  "series_days": 90,
  "initial_capital": 100000,
  "lot_size": 100,
  "preview_days": 30,
  "history_path": "./.klinecamp/history.db",
  "max_turn": 36,
  "quiz_questions": 3,
}
"""

import json
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

from klinecamp.errors import ConfigurationError
from klinecamp.history.store import DEFAULT_NAMESPACE
from klinecamp.tips import DEFAULT_TIP

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


@dataclass
class GameConfig:
    """
    Tunables shared by the game modes.
    """

    series_days: int = 90
    initial_capital: float = 100_000.0
    lot_size: int = 100
    preview_days: int = 30
    history_path: Optional[Path] = None
    namespace: str = DEFAULT_NAMESPACE
    max_turn: int = 36
    quiz_questions: int = 3
    fallback_tip: str = DEFAULT_TIP
    log_level: str = "INFO"


def _strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    in_string = False
    while i < len(text):
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < len(text):
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise ValueError("Unterminated block comment")
            i = end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def loads_jsonc(text: str) -> Any:
    """Parse JSON with ``//`` and ``/* */`` comments and trailing commas."""
    return json.loads(_TRAILING_COMMA.sub(r"\1", _strip_comments(text)))


def _positive_int(raw: Mapping[str, Any], key: str, default: int, *, allow_zero: bool = False) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key} must be an integer")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigurationError(f"{key} must be {'non-negative' if allow_zero else 'positive'}, got {value}")
    return value


def config_from_dict(raw: Mapping[str, Any], base_dir: Optional[Path] = None) -> GameConfig:
    if not isinstance(raw, Mapping):
        raise ConfigurationError("config must be an object")
    known = {f.name for f in fields(GameConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    defaults = GameConfig()
    try:
        initial_capital = float(raw.get("initial_capital", defaults.initial_capital))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("initial_capital must be a number") from exc
    if initial_capital <= 0:
        raise ConfigurationError("initial_capital must be positive")

    history_path: Optional[Path] = None
    if raw.get("history_path") is not None:
        history_path = Path(str(raw["history_path"]))
        if base_dir is not None and not history_path.is_absolute():
            history_path = base_dir / history_path

    return GameConfig(
        series_days=_positive_int(raw, "series_days", defaults.series_days, allow_zero=True),
        initial_capital=initial_capital,
        lot_size=_positive_int(raw, "lot_size", defaults.lot_size),
        preview_days=_positive_int(raw, "preview_days", defaults.preview_days),
        history_path=history_path,
        namespace=str(raw.get("namespace", defaults.namespace)),
        max_turn=_positive_int(raw, "max_turn", defaults.max_turn),
        quiz_questions=_positive_int(raw, "quiz_questions", defaults.quiz_questions),
        fallback_tip=str(raw.get("fallback_tip", defaults.fallback_tip)),
        log_level=str(raw.get("log_level", defaults.log_level)),
    )


def load_game_config(path: Path | str) -> GameConfig:
    """Load :class:`GameConfig` from a JSON/JSONC file; relative paths resolve next to it."""
    cfg_path = Path(path)
    try:
        raw = loads_jsonc(cfg_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config {cfg_path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config {cfg_path}: {exc}") from exc
    return config_from_dict(raw, base_dir=cfg_path.parent)


__all__ = ["GameConfig", "loads_jsonc", "config_from_dict", "load_game_config"]
