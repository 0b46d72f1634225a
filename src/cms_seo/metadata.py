from __future__ import annotations

from typing import Optional

from cms_seo.domain.models import EffectiveMetadata, PageMetadata, RenderContext, SiteSettings
from cms_seo.utils.frontmatter import extract_page_metadata


def _first_present(*values: Optional[str]) -> str:
    """Return the first value that is not None, else ""."""
    for v in values:
        if v is not None:
            return v
    return ""


def compose_title(page_title: str, settings: SiteSettings) -> str:
    """
    Build the document title from a page title and the site settings.

    Rule order matters: a non-empty page title with append_site_title off
    must stay as is, never be replaced by the site title.
    """
    if settings.append_site_title and page_title and settings.site_title:
        return f"{page_title} {settings.title_separator} {settings.site_title}"
    if not page_title and settings.site_title:
        return settings.site_title
    return page_title


def resolve_metadata(
    page: PageMetadata,
    settings: SiteSettings,
    *,
    fallback_title: Optional[str] = None,
) -> EffectiveMetadata:
    page_title = _first_present(page.title, fallback_title)
    return EffectiveMetadata(
        full_title=compose_title(page_title, settings),
        description=_first_present(page.description, settings.site_description),
        social_image=_first_present(page.social_image, settings.social_image),
    )


def resolve_context(ctx: RenderContext) -> EffectiveMetadata:
    page = extract_page_metadata(ctx.content)
    return resolve_metadata(page, ctx.settings, fallback_title=ctx.fallback_title)
