# mdalerts/markdown/postprocessors/alert_enhancer.py
"""
Postprocessor that turns GitHub-style alert blockquotes into alert banners.

Markdown such as:
    > [!IMPORTANT]
    > Read this first.

Is rendered by Pandoc as:
    <blockquote><p>[!IMPORTANT]
    Read this first.</p></blockquote>

This postprocessor transforms it to:
    <blockquote class="markdown-alert markdown-alert-important">
        <p><img src="qrc:/res/important.svg"/></p>
        <p>
    Read this first.</p>
    </blockquote>

Rules:
- Only the first paragraph of a blockquote is inspected
- The marker must sit on the first line of that paragraph
- Two different markers on that first line leave the blockquote untouched
- A <br> ends the first line just like a newline does
- Running the postprocessor twice changes nothing the second time

Supported markers: [!NOTE], [!TIP], [!IMPORTANT], [!WARNING], [!CAUTION]
"""

import logging
from typing import Any, Optional

from bs4 import BeautifulSoup

from ..config import get_alert_config
from ..tree import DocumentTree, SoupTree
from .alert_markers import AlertMarker, all_tokens, lookup

logger = logging.getLogger(__name__)

LINE_BREAKS = ("\n", "<br")


def evaluate_alert(tree: DocumentTree, blockquote: Any) -> Optional[AlertMarker]:
    """
    Decide which alert marker, if any, applies to a blockquote.

    Args:
        tree: Document tree the blockquote belongs to
        blockquote: The blockquote node to inspect

    Returns:
        The marker to apply, or None when there is no first paragraph,
        no marker on its first line, or more than one marker on that line
    """
    paragraph = tree.first_paragraph(blockquote)
    if paragraph is None:
        return None

    first_line = _first_line(tree.get_content(paragraph))
    on_first_line = {token for token in all_tokens() if token in first_line}

    if not on_first_line:
        return None

    # Markers further down the paragraph are plain text
    if len(on_first_line) > 1:
        logger.debug(
            "Skipping ambiguous alert blockquote with markers %s",
            sorted(on_first_line),
        )
        return None

    return lookup(on_first_line.pop())


def _first_line(content: str) -> str:
    """Return the markup before the first newline or <br> tag."""
    end = len(content)
    for line_break in LINE_BREAKS:
        index = content.find(line_break)
        if index != -1:
            end = min(end, index)
    return content[:end]


def apply_alert(
    tree: DocumentTree,
    blockquote: Any,
    marker: AlertMarker,
    icon_scheme: str = "qrc",
    icon_dir: str = "res",
    alert_class: str = "markdown-alert",
) -> None:
    """
    Convert a blockquote into an alert banner for ``marker``.

    The marker token is stripped from the first paragraph, a paragraph
    holding the icon image is inserted as the first child, and the alert
    classes are merged into the blockquote's class list.
    """
    paragraph = tree.first_paragraph(blockquote)
    tree.remove_text(paragraph, marker.token)

    icon_block = tree.create_element("p")
    icon = tree.create_element(
        "img", {"src": f"{icon_scheme}:/{icon_dir}/{marker.icon_id}.svg"}
    )
    tree.append_child(icon_block, icon)
    tree.prepend_child(blockquote, icon_block)

    classes = tree.get_classes(blockquote)
    for cls in (alert_class, marker.css_class):
        if cls not in classes:
            classes.append(cls)
    tree.set_classes(blockquote, classes)


def replace_alerts(tree: DocumentTree, **options) -> int:
    """
    Apply alert markers to every eligible blockquote in the tree.

    Args:
        tree: Document tree to mutate in place
        **options: Passed through to apply_alert (icon_scheme, icon_dir, alert_class)

    Returns:
        Number of blockquotes converted
    """
    converted = 0

    for blockquote in tree.find_all("blockquote"):
        marker = evaluate_alert(tree, blockquote)
        if marker is None:
            continue

        apply_alert(tree, blockquote, marker, **options)
        converted += 1

    return converted


def alert_enhancer(
    html: str,
    context: dict,
    icon_scheme: str = "qrc",
    icon_dir: str = "res",
    alert_class: str = "markdown-alert",
) -> str:
    """
    Convert alert blockquotes in an HTML document.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)
        icon_scheme: URL scheme of the icon source (default: "qrc")
        icon_dir: Resource directory holding the icons (default: "res")
        alert_class: Class shared by every alert blockquote (default: "markdown-alert")

    Returns:
        Processed HTML with alert blockquotes converted
    """
    soup = BeautifulSoup(html, "html.parser")

    converted = replace_alerts(
        SoupTree(soup),
        icon_scheme=icon_scheme,
        icon_dir=icon_dir,
        alert_class=alert_class,
    )
    if converted:
        logger.info("Converted %d alert blockquote(s)", converted)

    return str(soup)


def alert_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for alert_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return alert_enhancer(html, context, **get_alert_config())


def transform_html(html: str) -> str:
    """Convert alert blockquotes in a standalone HTML string."""
    return alert_enhancer_default(html, {})
