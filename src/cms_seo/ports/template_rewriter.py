from __future__ import annotations

from typing import Protocol


class TemplateRewriter(Protocol):
    """
    Edits a full HTML document. Both operations return a new string and
    leave the document unchanged when their anchor element is missing.
    """

    def replace_title(self, template: str, title: str) -> str:
        ...

    def insert_into_head(self, template: str, markup: str) -> str:
        ...
