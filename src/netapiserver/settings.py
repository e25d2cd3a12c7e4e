# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from dataclasses import dataclass, fields
import os
from pathlib import Path

import structlog
import yaml

logger = structlog.getLogger()

DEFAULT_CONFIG_PATH = "/etc/netapiserver/config.yaml"
BOOLEAN_KEYS = ("debug", "debug_http", "fabrics_enabled")


@dataclass(frozen=True)
class Config:
    datacenter_name: str = "coal"
    fabrics_enabled: bool = False
    napi_url: str = "http://napi.local"
    directory_url: str = "http://directory.local"
    # seconds
    backend_timeout: float = 30
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    debug_http: bool = False


def config_path() -> Path:
    """Return the path of the configuration file."""
    return Path(os.getenv("NETAPISERVER_CONFIG", DEFAULT_CONFIG_PATH))


def read_config(path: Path | None = None) -> Config:
    """Read the configuration file.

    A missing file gives the defaults, unknown keys are ignored.
    """
    path = path or config_path()
    try:
        with path.open() as fd:
            data = yaml.safe_load(fd) or {}
    except FileNotFoundError:
        logger.warning("Configuration file not found", path=str(path))
        return Config()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {path}")

    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        logger.warning(
            "Ignoring unknown configuration keys", keys=sorted(unknown)
        )

    values = {k: v for k, v in data.items() if k in known}
    for key in BOOLEAN_KEYS:
        values.setdefault(key, False)
        if not isinstance(values[key], bool):
            raise ValueError(
                f"Invalid value for {key} in {path}: expected true or false"
            )
    values["debug_http"] = values["debug"] or values["debug_http"]
    return Config(**values)
