"""
SEO plugin entry point.

Hooks into the host CMS with:
  - admin section "seo"   → settings form (admin_page)
  - before_render hook    → title + meta tag injection (before_render)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from cms_seo.adapters.rewriting.regex_rewriter import RegexTemplateRewriter
from cms_seo.admin.form import handle_admin_request
from cms_seo.app.container import Container, build_container
from cms_seo.app.pipeline import render_page
from cms_seo.config import AdminSection
from cms_seo.ports import PluginHost, SettingsStore, TemplateRewriter

logger = logging.getLogger(__name__)

BEFORE_RENDER_HOOK = "before_render"


@dataclass(frozen=True, slots=True)
class SeoPlugin:
    store: SettingsStore
    rewriter: TemplateRewriter = field(default_factory=RegexTemplateRewriter)
    admin: AdminSection = field(default_factory=AdminSection)

    @classmethod
    def from_container(cls, container: Container) -> "SeoPlugin":
        return cls(store=container.store, rewriter=container.rewriter, admin=container.config.admin)

    def register(self, host: PluginHost) -> None:
        host.register_admin_section(
            self.admin.name,
            label=self.admin.label,
            menu_order=self.admin.menu_order,
            render_callback=self.admin_page,
        )
        host.add_hook(BEFORE_RENDER_HOOK, self.before_render)
        logger.debug("SEO plugin registered (admin section=%s)", self.admin.name)

    def before_render(
        self,
        template: str,
        *,
        content: object = None,
        title: Optional[str] = None,
    ) -> str:
        return render_page(
            template,
            store=self.store,
            content=content,
            fallback_title=title,
            rewriter=self.rewriter,
        )

    def admin_page(self, method: str = "GET", form: Optional[Mapping[str, Any]] = None) -> str:
        return handle_admin_request(self.store, method=method, form=form)


def register(host: PluginHost, container: Optional[Container] = None) -> SeoPlugin:
    """Build the plugin from configuration and attach it to the host."""
    plugin = SeoPlugin.from_container(container or build_container())
    plugin.register(host)
    return plugin
