from __future__ import annotations

from typing import Optional

from cms_seo.adapters.rewriting.regex_rewriter import RegexTemplateRewriter
from cms_seo.domain.models import RenderContext
from cms_seo.metadata import resolve_context
from cms_seo.ports import SettingsStore, TemplateRewriter
from cms_seo.tags import render_tag_block


def inject_meta_tags(
    template: str,
    ctx: RenderContext,
    *,
    rewriter: Optional[TemplateRewriter] = None,
) -> str:
    """
    Return a copy of the template with the resolved <title> and SEO meta tags.

    Missing <title> or </head> elements are skipped silently.
    """
    rewriter = rewriter or RegexTemplateRewriter()
    meta = resolve_context(ctx)

    if meta.full_title:
        template = rewriter.replace_title(template, meta.full_title)

    return rewriter.insert_into_head(template, render_tag_block(meta))


def render_page(
    template: str,
    *,
    store: SettingsStore,
    content: object = None,
    fallback_title: Optional[str] = None,
    rewriter: Optional[TemplateRewriter] = None,
) -> str:
    """Load settings fresh from the store, then inject."""
    ctx = RenderContext(content=content, fallback_title=fallback_title, settings=store.load())
    return inject_meta_tags(template, ctx, rewriter=rewriter)
