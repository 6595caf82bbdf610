# mdalerts/markdown/postprocessors/__init__.py

from .alert_enhancer import (
    alert_enhancer,
    alert_enhancer_default,
    apply_alert,
    evaluate_alert,
    replace_alerts,
    transform_html,
)
from .alert_markers import ALERT_MARKERS, AlertKind, AlertMarker, all_tokens, lookup

POSTPROCESSORS = [
    alert_enhancer_default,  # Convert [!NOTE]-style blockquotes into alert banners
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
