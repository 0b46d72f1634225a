from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


# -------------------------
# Site-wide settings
# -------------------------

@dataclass(frozen=True, slots=True)
class SiteSettings:
    """
    Global SEO defaults edited from the admin form.

    Loaded once per render; never mutated while a page is being rendered.
    """
    site_title: str = "My Website"
    site_description: str = ""
    title_separator: str = "-"
    append_site_title: bool = True
    social_image: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "site_title": self.site_title,
            "site_description": self.site_description,
            "title_separator": self.title_separator,
            "append_site_title": self.append_site_title,
            "social_image": self.social_image,
        }


# -------------------------
# Per-page objects
# -------------------------

@dataclass(frozen=True, slots=True)
class PageMetadata:
    """
    Overrides parsed from a page's JSON frontmatter.

    None means "not present", which is different from an explicit empty string.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    social_image: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EffectiveMetadata:
    """
    The resolved values actually emitted into the page.
    """
    full_title: str = ""
    description: str = ""
    social_image: str = ""


@dataclass(frozen=True, slots=True)
class RenderContext:
    """
    Everything the injector needs to know about the page being rendered.
    """
    content: Any = ""  # raw page source; anything that is not a str counts as empty
    fallback_title: Optional[str] = None
    settings: SiteSettings = field(default_factory=SiteSettings)
