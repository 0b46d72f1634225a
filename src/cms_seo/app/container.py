from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cms_seo.adapters.rewriting.regex_rewriter import RegexTemplateRewriter
from cms_seo.adapters.settings.json_file_store import JsonFileSettingsStore
from cms_seo.config import PluginConfig, load_config
from cms_seo.ports import SettingsStore, TemplateRewriter


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds instances of adapters implementing the plugin's ports.
    """
    config: PluginConfig
    store: SettingsStore
    rewriter: TemplateRewriter


def build_container(
    config: Optional[PluginConfig] = None,
    *,
    settings_file: Optional[str | Path] = None,
) -> Container:
    config = config or load_config()
    path = Path(settings_file) if settings_file else config.settings_file
    return Container(
        config=config,
        store=JsonFileSettingsStore(path=path),
        rewriter=RegexTemplateRewriter(),
    )
