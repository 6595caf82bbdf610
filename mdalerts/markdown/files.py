# mdalerts/markdown/files.py
"""Convert alert blockquotes in an HTML file on disk."""

import logging
from pathlib import Path

from .config import get_alert_config
from .postprocessors.alert_enhancer import replace_alerts
from .tree import SoupTree

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "FS operation failed"


class AlertFileError(Exception):
    """Reading the input or writing the output file failed."""


def replace_alerts_in_file(input_path, output_path) -> int:
    """
    Read an HTML file, convert its alert blockquotes and write the result.

    Args:
        input_path: HTML file to read
        output_path: File the converted HTML is written to

    Returns:
        Number of blockquotes converted

    Raises:
        AlertFileError: If either file operation fails
    """
    try:
        html = Path(input_path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read {input_path}: {e}", exc_info=True)
        raise AlertFileError(ERROR_MESSAGE) from e

    tree = SoupTree.from_html(html)
    converted = replace_alerts(tree, **get_alert_config())

    try:
        Path(output_path).write_text(str(tree.soup), encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write {output_path}: {e}", exc_info=True)
        raise AlertFileError(ERROR_MESSAGE) from e

    logger.info("Wrote %s with %d alert blockquote(s)", output_path, converted)
    return converted
