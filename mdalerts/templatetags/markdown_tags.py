# mdalerts/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from mdalerts.markdown.postprocessors import transform_html
from mdalerts.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_alerts")
def markdown_alerts_filter(value):
    """Convert alert blockquotes in HTML that was rendered elsewhere"""
    return mark_safe(transform_html(value or ""))
