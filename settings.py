from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from models import DEFAULT_STANDARD, validate_standard


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    standard: int = DEFAULT_STANDARD
    scorer: str = "passthrough"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        standard_raw = env.get("DECIDER_STANDARD", str(DEFAULT_STANDARD))
        try:
            standard = int(standard_raw)
        except ValueError as exc:
            raise ValueError(f"DECIDER_STANDARD must be an integer, got {standard_raw!r}.") from exc
        return cls(
            host=env.get("HOST", "127.0.0.1"),
            port=int(env.get("PORT", "8080")),
            standard=validate_standard(standard),
            scorer=env.get("DECIDER_SCORER", "passthrough").strip() or "passthrough",
            log_level=env.get("DECIDER_LOG_LEVEL", "INFO").upper(),
            log_file=env.get("DECIDER_LOG_FILE") or None,
        )
