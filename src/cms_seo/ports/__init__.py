from .host import PluginHost
from .settings_store import SettingsStore
from .template_rewriter import TemplateRewriter

__all__ = [
    "PluginHost",
    "SettingsStore",
    "TemplateRewriter",
]
