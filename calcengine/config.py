"""Calculator settings: environment defaults, overlaid by a YAML/JSON config file.

Config file keys (all optional):
  precision: 10        # significant digits for printed results
  show_tree: true      # print the parenthesized tree before the result
  show_tokens: false   # print the token stream before the result
  prompt: "> "         # prompt used when reading from standard input

Environment variables: CALC_PRECISION, CALC_SHOW_TREE, CALC_SHOW_TOKENS, CALC_PROMPT.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_PROMPT = "Enter expression (e.g. (10 + 20) * 30): "


def load_cfg(path: str) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in (".yml", ".yaml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text) if text.strip() else None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping, got {type(data).__name__}")
    return data


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).lower() in ["1", "true", "yes"]


def parse_precision(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    precision = int(value)
    if precision <= 0:
        raise ValueError(f"precision must be > 0, got {precision}")
    return precision


@dataclass
class Settings:
    precision: Optional[int] = None
    show_tree: bool = False
    show_tokens: bool = False
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            precision=parse_precision(os.getenv("CALC_PRECISION")),
            show_tree=_env_flag("CALC_SHOW_TREE"),
            show_tokens=_env_flag("CALC_SHOW_TOKENS"),
            prompt=os.getenv("CALC_PROMPT", DEFAULT_PROMPT),
        )

    def update(self, cfg: dict) -> "Settings":
        """Overlay known keys from ``cfg``; unknown keys and null values are ignored."""
        known = {f.name for f in fields(self)}
        for key, value in cfg.items():
            if key not in known or value is None:
                continue
            if key == "precision":
                value = parse_precision(value)
            elif key in ("show_tree", "show_tokens"):
                value = value if isinstance(value, bool) else str(value).lower() in ["1", "true", "yes"]
            else:
                value = str(value)
            setattr(self, key, value)
        return self


def load_settings(path: Optional[str] = None) -> Settings:
    settings = Settings.from_env()
    if path:
        settings.update(load_cfg(path))
    return settings
