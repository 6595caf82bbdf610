def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Alert detection depends on the line breaks of the source markdown
    surviving into the HTML, so Pandoc is told to preserve wrapping and
    hard line breaks are left off.
    """
    return {
        "extra_args": [
            # Let raw HTML in quotes pass through untouched
            "--from=markdown+raw_html",
            # Keep source line breaks, the first line of a paragraph decides the alert
            "--wrap=preserve",
        ],
    }


def get_alert_config():
    """
    Configuration for the alert blockquote postprocessor.

    Icons are referenced as "<icon_scheme>:/<icon_dir>/<kind>.svg",
    e.g. "qrc:/res/important.svg".
    """
    return {
        "icon_scheme": "qrc",
        "icon_dir": "res",
        "alert_class": "markdown-alert",
    }
