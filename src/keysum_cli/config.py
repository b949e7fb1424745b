from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict
import json
from pathlib import Path

from .summarizer import BULLET


@dataclass
class SummarizerConfig:
    name: str = "keysum"
    top_words: int = 15
    bullet: str = BULLET
    highlight_style: str = "bold black on yellow"
    user_agent: str = "KeySum/0.1"
    timeout_s: float = 20.0
    max_chars: int = 1_000_000
    headers: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummarizerConfig":
        # Simple dict→dataclass conversion
        return SummarizerConfig(
            name=data.get("name", "keysum"),
            top_words=int(data.get("top_words", 15)),
            bullet=str(data.get("bullet", BULLET)),
            highlight_style=data.get("highlight_style", "bold black on yellow"),
            user_agent=data.get("user_agent", "KeySum/0.1"),
            timeout_s=float(data.get("timeout_s", 20.0)),
            max_chars=int(data.get("max_chars", 1_000_000)),
            headers=dict(data.get("headers", {}) or {}),
        )

    @staticmethod
    def load(path: Path) -> "SummarizerConfig":
        return SummarizerConfig.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    @staticmethod
    def load_json_str(s: str) -> "SummarizerConfig":
        return SummarizerConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "name": self.name,
            "top_words": self.top_words,
            "bullet": self.bullet,
            "highlight_style": self.highlight_style,
            "user_agent": self.user_agent,
            "timeout_s": self.timeout_s,
            "max_chars": self.max_chars,
            "headers": self.headers,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummarizerConfig().dump(), encoding="utf-8")
