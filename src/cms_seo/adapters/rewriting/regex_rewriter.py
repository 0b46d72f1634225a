from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"<title>.*?</title>", re.IGNORECASE | re.DOTALL)
_HEAD_CLOSE = "</head>"


@dataclass(frozen=True, slots=True)
class RegexTemplateRewriter:
    """
    Rewrites documents with plain pattern matching, no HTML parsing:
      - first <title>...</title> (any case, may span lines) gets replaced
      - markup is spliced in front of the first literal </head>
    """

    def replace_title(self, template: str, title: str) -> str:
        replacement = f"<title>{html.escape(title)}</title>"
        # callable replacement so backslashes in the title are taken literally
        new_template, n = _TITLE_RE.subn(lambda _m: replacement, template, count=1)
        if n == 0:
            logger.debug("No <title> element in template; title left as is")
        return new_template

    def insert_into_head(self, template: str, markup: str) -> str:
        if _HEAD_CLOSE not in template:
            logger.debug("No </head> in template; dropping %d chars of meta tags", len(markup))
            return template
        return template.replace(_HEAD_CLOSE, markup + _HEAD_CLOSE, 1)
