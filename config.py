"""
config.py — Runtime Settings
============================
Defaults live on the dataclass; any field can be overridden from the
environment with an ALGOVIZ_ prefix:

    ALGOVIZ_CACHE_CAPACITY=50 ALGOVIZ_LOG_LEVEL=DEBUG python main.py
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "ALGOVIZ_"


@dataclass
class Settings:
    cache_capacity:   int   = 100       # array traces kept by the ResultCache
    max_array_length: int   = 500
    max_graph_nodes:  int   = 200
    max_dp_cells:     int   = 400       # rows × cols of one DP table
    max_value_range:  int   = 1000      # counting sort: max - min
    tree_root_x:      float = 400.0
    tree_root_y:      float = 50.0
    tree_spacing:     float = 150.0
    log_level:        str   = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings, overriding each field found as ALGOVIZ_<FIELD>."""
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            cast = type(getattr(cls, f.name))
            try:
                overrides[f.name] = cast(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{f.name.upper()}: cannot parse {raw!r}") from None
        return cls(**overrides)

    def to_flask_config(self) -> dict:
        return {f"ALGOVIZ_{f.name.upper()}": getattr(self, f.name) for f in fields(self)}
