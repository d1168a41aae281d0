"""Settings: runtime configuration for sources and the browser."""

from __future__ import annotations

import os
from typing import Mapping

import param

ENV_PREFIX = "LAZY_SELECTION_"


class Settings(param.Parameterized):
    """Runtime configuration.

    Values can be overridden from ``LAZY_SELECTION_*`` environment
    variables via :meth:`from_env`; param bounds validate them.
    """

    api_base_url = param.String(default="https://api.artic.edu/api/v1")
    page_size = param.Integer(default=12, bounds=(1, 100))
    timeout = param.Number(default=10.0, bounds=(0.1, None))
    default_total = param.Integer(default=1000, bounds=(0, None))
    log_level = param.Selector(
        default="INFO",
        objects=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build Settings, applying any ``LAZY_SELECTION_*`` overrides."""
        environ = os.environ if environ is None else environ
        overrides: dict = {}
        for name in ("api_base_url", "page_size", "timeout", "default_total", "log_level"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            if name in ("page_size", "default_total"):
                overrides[name] = int(raw)
            elif name == "timeout":
                overrides[name] = float(raw)
            elif name == "log_level":
                overrides[name] = raw.upper()
            else:
                overrides[name] = raw.rstrip("/")
        return cls(**overrides)
