from __future__ import annotations

import html
from typing import Any, Mapping, Optional

from cms_seo.admin.templates import ADMIN_FORM_TEMPLATE, SUCCESS_MESSAGE_TEMPLATE
from cms_seo.domain.models import SiteSettings
from cms_seo.ports import SettingsStore

SAVE_ACTION = "save_seo_settings"
SAVED_MESSAGE = "SEO settings saved successfully!"


def _field(form: Mapping[str, Any], key: str, default: str = "") -> str:
    value = form.get(key)
    if value is None:
        return default
    return str(value).strip()


def settings_from_form(form: Mapping[str, Any]) -> SiteSettings:
    """
    Build settings from a submitted admin form.

    Text fields are trimmed; a missing separator falls back to "-". The
    checkbox only shows up in the form data when ticked, so its presence
    alone means True.
    """
    return SiteSettings(
        site_title=_field(form, "site_title"),
        site_description=_field(form, "site_description"),
        title_separator=_field(form, "title_separator", "-"),
        append_site_title="append_site_title" in form,
        social_image=_field(form, "social_image"),
    )


def render_admin_page(settings: SiteSettings, *, message: Optional[str] = None) -> str:
    banner = ""
    if message:
        banner = SUCCESS_MESSAGE_TEMPLATE.format(message=html.escape(message))

    return banner + ADMIN_FORM_TEMPLATE.format(
        site_title=html.escape(settings.site_title),
        site_description=html.escape(settings.site_description),
        title_separator=html.escape(settings.title_separator),
        append_checked="checked" if settings.append_site_title else "",
        social_image=html.escape(settings.social_image),
    )


def handle_admin_request(
    store: SettingsStore,
    *,
    method: str = "GET",
    form: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Save on a POST carrying action=save_seo_settings, then render the form
    with whatever the store now holds.
    """
    form = form or {}
    message: Optional[str] = None

    if method.upper() == "POST" and form.get("action") == SAVE_ACTION:
        store.save(settings_from_form(form))
        message = SAVED_MESSAGE

    return render_admin_page(store.load(), message=message)
