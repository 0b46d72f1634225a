from unittest.mock import MagicMock

from cms_seo.adapters.settings.in_memory_store import InMemorySettingsStore
from cms_seo.adapters.settings.json_file_store import JsonFileSettingsStore
from cms_seo.app.container import build_container
from cms_seo.config import PluginConfig
from cms_seo.domain.models import SiteSettings
from cms_seo.plugin import BEFORE_RENDER_HOOK, SeoPlugin, register


class FakeHost:
    """Minimal CMS host: remembers sections and runs hooks like the render pipeline would."""

    def __init__(self):
        self.sections = {}
        self.hooks = {}

    def register_admin_section(self, name, *, label, menu_order, render_callback):
        self.sections[name] = {"label": label, "menu_order": menu_order, "render_callback": render_callback}

    def add_hook(self, hook_name, callback):
        self.hooks.setdefault(hook_name, []).append(callback)

    def render(self, template, *, content, title):
        for cb in self.hooks.get(BEFORE_RENDER_HOOK, []):
            template = cb(template, content=content, title=title)
        return template


def test_register_calls_host():
    host = MagicMock()
    plugin = SeoPlugin(store=InMemorySettingsStore())
    plugin.register(host)

    host.register_admin_section.assert_called_once_with(
        "seo", label="SEO", menu_order=30, render_callback=plugin.admin_page
    )
    host.add_hook.assert_called_once_with("before_render", plugin.before_render)


def test_before_render_through_host():
    store = InMemorySettingsStore()
    store.save(SiteSettings(site_title="Fearless", site_description="CMS", title_separator="-"))
    host = FakeHost()
    SeoPlugin(store=store).register(host)

    out = host.render(
        "<html><head><title>x</title></head><body></body></html>",
        content='<!-- json {"title": "Blog"} -->\n# Blog',
        title="Ignored",
    )
    assert "<title>Blog - Fearless</title>" in out
    assert '<meta name="twitter:description" content="CMS">' in out


def test_settings_are_reloaded_on_every_render():
    store = InMemorySettingsStore()
    plugin = SeoPlugin(store=store)
    store.save(SiteSettings(site_title="One"))
    first = plugin.before_render("<head><title></title></head>")
    store.save(SiteSettings(site_title="Two"))
    second = plugin.before_render("<head><title></title></head>")
    assert "<title>One</title>" in first
    assert "<title>Two</title>" in second


def test_admin_page_callback_saves():
    store = InMemorySettingsStore()
    host = FakeHost()
    SeoPlugin(store=store).register(host)

    render_callback = host.sections["seo"]["render_callback"]
    page = render_callback("POST", {"action": "save_seo_settings", "site_title": "Via Admin"})
    assert "SEO settings saved successfully!" in page
    assert store.load().site_title == "Via Admin"


def test_register_builds_from_container(tmp_path):
    container = build_container(PluginConfig(settings_file=tmp_path / "seo_settings.json"))
    host = FakeHost()
    plugin = register(host, container)

    assert isinstance(plugin.store, JsonFileSettingsStore)
    assert host.sections["seo"]["menu_order"] == 30
    assert len(host.hooks[BEFORE_RENDER_HOOK]) == 1
