from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from cms_seo.domain.models import PageMetadata

logger = logging.getLogger(__name__)

# <!-- json { ... } -->  at the very start of the content; first block only.
# Surrounding whitespace is stripped from the capture instead of matched with \s*,
# so an unclosed block stays a linear scan.
_JSON_FRONTMATTER_RE = re.compile(r"<!--\s*json(.*?)-->", re.DOTALL)

_RECOGNIZED_KEYS = ("title", "description", "social_image")


def parse_json_frontmatter(content: Any) -> dict[str, Any]:
    """
    Parse a leading ``<!-- json ... -->`` comment block.

    Args:
        content (Any): Raw page source. Anything that is not a str is treated as "".

    Returns:
        (dict[str, Any]): The parsed JSON object; empty when the block is missing,
        malformed, too deeply nested, or not an object.
    """
    if not isinstance(content, str):
        return {}

    m = _JSON_FRONTMATTER_RE.match(content)
    if m is None:
        return {}

    try:
        loaded = json.loads(m.group(1).strip())
    except (ValueError, RecursionError) as e:
        logger.debug("Ignoring unparseable JSON frontmatter: %s", e)
        return {}

    if not isinstance(loaded, dict):
        logger.debug("Ignoring JSON frontmatter that is not an object (%s)", type(loaded).__name__)
        return {}

    return loaded


def _normalize_value(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    # lists / objects can't be rendered into an attribute
    return None


def extract_page_metadata(content: Any) -> PageMetadata:
    """
    Read title/description/social_image overrides from the page's JSON frontmatter.

    Never raises; anything unusable comes back as "not present".
    """
    frontmatter = parse_json_frontmatter(content)
    values = {key: _normalize_value(frontmatter.get(key)) for key in _RECOGNIZED_KEYS}
    return PageMetadata(**values)
