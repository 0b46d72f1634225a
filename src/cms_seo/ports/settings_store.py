from __future__ import annotations

from typing import Protocol

from cms_seo.domain.models import SiteSettings


class SettingsStore(Protocol):
    """
    Loads and persists the site-wide SEO settings.

    load() must always return a complete SiteSettings (defaults applied).
    """

    def load(self) -> SiteSettings:
        ...

    def save(self, settings: SiteSettings) -> None:
        ...
