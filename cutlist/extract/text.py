"""
cutlist.extract.text - Clip display text resolution.

Motion graphics templates expose their on-screen text as component
parameters; native graphics clips do not, and report placeholder glyphs
instead. Resolution order:

1. Well-known text parameter names, looked up exactly.
2. Any parameter whose display name mentions text or title.
3. The clip's own name.

A parameter value only counts if it starts with a printable ASCII
character, which filters out the placeholder glyphs.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from cutlist.host import (
    GraphicsComponent,
    GraphicsSupport,
    SupportsParamLookup,
    graphics_capability,
)
from cutlist.logging import logger

_TRIM_RE = re.compile(r"^[\s\ufeff\xa0]+|[\s\ufeff\xa0]+$")


def trim_to_string(value: Any) -> str:
    """Stringify a host value and strip whitespace, BOM and NBSP at both ends."""
    if value is None:
        return ""
    return _TRIM_RE.sub("", str(value))


def is_readable_text(text: str) -> bool:
    """True if text is non-empty and starts with a printable ASCII character."""
    return bool(text) and 32 <= ord(text[0]) <= 126


def _readable_value(param: Any) -> str | None:
    if param is None or not callable(getattr(param, "get_value", None)):
        return None
    value = param.get_value()
    if value is None:
        return None
    text = trim_to_string(value)
    return text if is_readable_text(text) else None


def text_from_named_params(component: GraphicsComponent, names: Iterable[str]) -> str | None:
    if not isinstance(component, SupportsParamLookup):
        return None
    for name in names:
        text = _readable_value(component.param_for_display_name(name))
        if text is not None:
            return text
    return None


def text_from_any_param(component: GraphicsComponent, keywords: Iterable[str]) -> str | None:
    keywords = [k.lower() for k in keywords]
    for param in component.properties:
        if param is None:
            continue
        display_name = str(getattr(param, "display_name", "") or "").lower()
        if not any(k in display_name for k in keywords):
            continue
        text = _readable_value(param)
        if text is not None:
            return text
    return None


def graphics_text(
    clip: Any,
    param_names: Iterable[str],
    keywords: Iterable[str],
) -> str | None:
    """Resolve text from a clip's graphics component, or None."""
    support, component = graphics_capability(clip)
    if support is not GraphicsSupport.AVAILABLE or component is None:
        return None
    return text_from_named_params(component, param_names) or text_from_any_param(
        component, keywords
    )


def resolve_clip_text(
    clip: Any,
    param_names: Iterable[str],
    keywords: Iterable[str],
) -> str:
    """Resolve the display text for a clip.

    Graphics lookup failures never abort the clip; the clip name is used
    instead.

    Args:
        clip: Host clip
        param_names: Parameter display names to try first, in order
        keywords: Lowercase substrings that mark a text parameter

    Returns:
        Trimmed display text (may be empty)
    """
    clip_name = trim_to_string(clip.name)
    try:
        text = graphics_text(clip, param_names, keywords)
    except Exception as e:
        logger.debug("Graphics text lookup failed for clip %r: %s", clip_name, e)
        text = None
    return text if text is not None else clip_name
