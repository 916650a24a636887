"""Project-level settings for accessible form rendering."""
from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "LABEL_TEXT_CLASS": "label-text",
    "ERROR_TEXT_CLASS": "error-text",
    "LEGEND_CLASS": "",
    "AUTO_ID": "%s",
}


def get_setting(key: str) -> Any:
    """Return ``ACCESSIBLE_FORMS[key]`` falling back to the packaged default."""

    overrides = getattr(settings, "ACCESSIBLE_FORMS", None) or {}
    if key in overrides:
        return overrides[key]
    return DEFAULTS[key]
