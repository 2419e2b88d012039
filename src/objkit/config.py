from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    reset_on_stringify: bool = True  # stringify() clears the builder's text
    log_level: str = "WARNING"


DEFAULT_CONFIG = ObjkitConfig()
