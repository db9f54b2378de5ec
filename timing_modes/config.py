from __future__ import annotations

from typing import List, Optional

import yaml
from pydantic import BaseModel


class AppConfig(BaseModel):
    steps: Optional[int] = None
    curves: Optional[List[str]] = None
    output_dir: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    precision: Optional[int] = None


def load_config(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(**data)
