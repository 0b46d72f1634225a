from __future__ import annotations

import html

from cms_seo.domain.models import EffectiveMetadata

# (attribute, key, field on EffectiveMetadata or None for a fixed value, fixed value)
_TAG_LAYOUT: tuple[tuple[str, str, str | None, str], ...] = (
    ("name", "description", "description", ""),
    ("property", "og:type", None, "website"),
    ("property", "og:title", "full_title", ""),
    ("property", "og:description", "description", ""),
    ("property", "og:image", "social_image", ""),
    ("name", "twitter:card", None, "summary_large_image"),
    ("name", "twitter:title", "full_title", ""),
    ("name", "twitter:description", "description", ""),
    ("name", "twitter:image", "social_image", ""),
)


def meta_tag(attr: str, key: str, content: str) -> str:
    return f'<meta {attr}="{key}" content="{html.escape(content, quote=True)}">'


def render_meta_tags(meta: EffectiveMetadata) -> list[str]:
    """
    Render description, Open Graph and Twitter Card tags in their fixed order.

    og:type and twitter:card are always emitted; every other tag only when its
    value is non-empty. All values are HTML-escaped.
    """
    tags: list[str] = []
    for attr, key, source, fixed in _TAG_LAYOUT:
        if source is None:
            tags.append(meta_tag(attr, key, fixed))
            continue
        value = getattr(meta, source)
        if value:
            tags.append(meta_tag(attr, key, value))
    return tags


def render_tag_block(meta: EffectiveMetadata) -> str:
    return "".join(f"{tag}\n" for tag in render_meta_tags(meta))
