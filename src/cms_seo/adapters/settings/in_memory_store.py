from __future__ import annotations

from dataclasses import dataclass, field

from cms_seo.domain.models import SiteSettings


@dataclass(slots=True)
class InMemorySettingsStore:
    """
    Keeps settings in process memory. Handy for previews and tests.
    """
    _settings: SiteSettings = field(default_factory=SiteSettings)

    def load(self) -> SiteSettings:
        return self._settings

    def save(self, settings: SiteSettings) -> None:
        self._settings = settings
