# mdalerts/markdown/postprocessors/alert_markers.py
"""
Registry of the GitHub alert markers recognised in blockquotes.

Each marker token (e.g. ``[!NOTE]``) maps to an alert kind, the CSS class
added to the blockquote and the icon name used for the banner image.
The table is built once at import time and is read-only.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Optional


class AlertKind(enum.Enum):
    NOTE = "note"
    TIP = "tip"
    IMPORTANT = "important"
    WARNING = "warning"
    CAUTION = "caution"


@dataclass(frozen=True)
class AlertMarker:
    token: str
    kind: AlertKind
    css_class: str
    icon_id: str


def _build_marker(kind: AlertKind) -> AlertMarker:
    return AlertMarker(
        token=f"[!{kind.name}]",
        kind=kind,
        css_class=f"markdown-alert-{kind.value}",
        icon_id=kind.value,
    )


ALERT_MARKERS = MappingProxyType(
    {marker.token: marker for marker in map(_build_marker, AlertKind)}
)


def lookup(token: str) -> Optional[AlertMarker]:
    """Return the marker registered for ``token``, or None."""
    return ALERT_MARKERS.get(token)


def all_tokens() -> FrozenSet[str]:
    return frozenset(ALERT_MARKERS)
