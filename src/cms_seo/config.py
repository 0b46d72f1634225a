from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

SETTINGS_FILE_NAME = "seo_settings.json"


@dataclass(frozen=True)
class AdminSection:
    name: str = "seo"
    label: str = "SEO"
    menu_order: int = 30


@dataclass(frozen=True)
class PluginConfig:
    settings_file: Path
    admin: AdminSection = AdminSection()


def load_config(path: str | Path = "seo.toml", *, env_file: Optional[str | Path] = None) -> PluginConfig:
    """
    Resolve plugin configuration.

    Precedence (highest first):
      - SEO_CONFIG_FILE env var (path of the settings JSON)
      - ADMIN_CONFIG_DIR env var (directory holding seo_settings.json)
      - [paths] settings_file in seo.toml, if that file exists
      - ./config/seo_settings.json
    """
    load_dotenv(env_file)
    path = Path(path)

    raw: dict = {}
    if path.exists():
        with path.open("rb") as f:
            raw = tomllib.load(f)

    def expand(p: str) -> Path:
        return Path(os.path.expandvars(os.path.expanduser(p))).resolve()

    settings_file = expand(str(Path("config") / SETTINGS_FILE_NAME))
    if raw.get("paths", {}).get("settings_file"):
        settings_file = expand(raw["paths"]["settings_file"])
    if os.getenv("ADMIN_CONFIG_DIR"):
        settings_file = expand(os.environ["ADMIN_CONFIG_DIR"]) / SETTINGS_FILE_NAME
    if os.getenv("SEO_CONFIG_FILE"):
        settings_file = expand(os.environ["SEO_CONFIG_FILE"])

    admin_raw = raw.get("admin", {})
    try:
        admin = AdminSection(
            name=str(admin_raw.get("name", "seo")),
            label=str(admin_raw.get("label", "SEO")),
            menu_order=int(admin_raw.get("menu_order", 30)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid [admin] config in {path}: {e}") from e

    return PluginConfig(settings_file=settings_file, admin=admin)
