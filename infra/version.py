from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version


_DEFAULT_APP_VERSION = "0.1.0"
_DISTRIBUTION = "siteledger"


def get_app_version() -> str:
    env_override = (os.getenv("SITELEDGER_APP_VERSION") or "").strip()
    if env_override:
        return env_override

    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return _DEFAULT_APP_VERSION


__all__ = ["get_app_version"]
