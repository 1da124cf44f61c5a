"""
Materialserv utilities
"""

from .collections import merge, get_value, remove
from .html import (
    JsExpression, Markup, encode, to_content, html_encode_json,
    add_css_class, class_names, render_tag_attributes, begin_tag, end_tag, tag, img,
)

__all__ = [
    'merge', 'get_value', 'remove',
    'JsExpression', 'Markup', 'encode', 'to_content', 'html_encode_json',
    'add_css_class', 'class_names', 'render_tag_attributes', 'begin_tag', 'end_tag', 'tag', 'img',
]
