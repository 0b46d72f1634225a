import pytest

from cms_seo.domain.models import EffectiveMetadata, PageMetadata, RenderContext, SiteSettings
from cms_seo.metadata import compose_title, resolve_context, resolve_metadata

SETTINGS = SiteSettings(
    site_title="Site",
    site_description="Site wide description",
    title_separator="|",
    append_site_title=True,
    social_image="https://example.com/default.png",
)


@pytest.mark.parametrize(
    "append, page_title, site_title, expected",
    [
        (True, "Home", "Site", "Home | Site"),
        (False, "Home", "Site", "Home"),
        (True, "", "Site", "Site"),
        (False, "", "Site", "Site"),
        (True, "", "", ""),
        (True, "Home", "", "Home"),
    ],
)
def test_title_composition(append, page_title, site_title, expected):
    settings = SiteSettings(site_title=site_title, title_separator="|", append_site_title=append)
    assert compose_title(page_title, settings) == expected


def test_empty_page_metadata_resolves_from_settings():
    meta = resolve_metadata(PageMetadata(), SETTINGS)
    assert meta == EffectiveMetadata(
        full_title="Site",
        description="Site wide description",
        social_image="https://example.com/default.png",
    )


def test_page_values_win_over_settings():
    page = PageMetadata(title="About", description="About us", social_image="https://example.com/about.png")
    meta = resolve_metadata(page, SETTINGS, fallback_title="Ignored")
    assert meta.full_title == "About | Site"
    assert meta.description == "About us"
    assert meta.social_image == "https://example.com/about.png"


def test_explicit_empty_page_value_still_wins():
    meta = resolve_metadata(PageMetadata(description="", social_image=""), SETTINGS)
    assert meta.description == ""
    assert meta.social_image == ""


def test_fallback_title_used_when_frontmatter_has_none():
    meta = resolve_metadata(PageMetadata(), SETTINGS, fallback_title="Home")
    assert meta.full_title == "Home | Site"


def test_explicit_empty_title_falls_to_site_title():
    meta = resolve_metadata(PageMetadata(title=""), SETTINGS, fallback_title="Home")
    assert meta.full_title == "Site"


def test_resolve_context_reads_frontmatter():
    ctx = RenderContext(
        content='<!-- json {"title": "Post", "social_image": "/img/post.png"} -->\nBody',
        fallback_title="Fallback",
        settings=SETTINGS,
    )
    meta = resolve_context(ctx)
    assert meta.full_title == "Post | Site"
    assert meta.description == "Site wide description"
    assert meta.social_image == "/img/post.png"


def test_resolve_context_with_malformed_frontmatter_uses_settings():
    ctx = RenderContext(content="<!-- json {not valid} -->", fallback_title=None, settings=SETTINGS)
    meta = resolve_context(ctx)
    assert meta.full_title == "Site"
    assert meta.description == SETTINGS.site_description
