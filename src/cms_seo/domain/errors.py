class SeoPluginError(Exception):
    """Base error for the SEO plugin."""


class SettingsStoreError(SeoPluginError):
    pass
