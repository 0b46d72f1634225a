from __future__ import annotations

import contextlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from cms_seo.domain.errors import SettingsStoreError
from cms_seo.domain.models import SiteSettings
from cms_seo.utils.json_sanitize import merge_with_defaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JsonFileSettingsStore:
    """
    Settings persisted as a single pretty-printed JSON object.

    File:
      - seo_settings.json  (site_title, site_description, title_separator,
                            append_site_title, social_image)
    """
    path: Path
    defaults: SiteSettings = SiteSettings()

    def load(self) -> SiteSettings:
        defaults = self.defaults.to_dict()

        if not self.path.exists():
            return self.defaults

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            logger.debug("Unreadable settings file %s, using defaults: %s", self.path, e)
            return self.defaults

        if not isinstance(raw, dict):
            logger.debug("Settings file %s is not a JSON object, using defaults", self.path)
            return self.defaults

        return SiteSettings(**merge_with_defaults(raw, defaults))

    def save(self, settings: SiteSettings) -> None:
        """
        Write to a temp file first, then atomically replace the settings file
        so a crashed save never leaves a truncated file behind.
        """
        tmp_file = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_file.open("w", encoding="utf-8") as f:
                f.write(json.dumps(settings.to_dict(), indent=4, ensure_ascii=False))
                f.flush()
            tmp_file.replace(self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_file.unlink(missing_ok=True)
            raise SettingsStoreError(f"Could not write settings to {self.path}: {e}") from e

        logger.info("Saved SEO settings to %s", self.path)
