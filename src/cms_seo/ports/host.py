from __future__ import annotations

from typing import Callable, Protocol


class PluginHost(Protocol):
    """
    The CMS side of the plugin contract: admin sections and render hooks.
    """

    def register_admin_section(
        self,
        name: str,
        *,
        label: str,
        menu_order: int,
        render_callback: Callable[..., str],
    ) -> None:
        ...

    def add_hook(self, hook_name: str, callback: Callable[..., str]) -> None:
        ...
