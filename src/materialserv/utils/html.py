"""
HTML tag rendering helpers.

Attribute dictionaries follow a few conventions:

- ``True`` renders a bare attribute (``disabled``), ``False``/``None`` drop it.
- ``class`` may be a string, a list, a set or a mapping of logical key to
  class name; duplicate class names collapse.
- ``style`` may be a mapping of CSS property to value.
- ``data`` and ``aria`` mappings expand to ``data-*``/``aria-*`` attributes.

Tag content is inserted as given. Escape user data with :func:`encode` or
:func:`to_content` before passing it in.
"""

import html
import json
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Optional, Tuple, Union

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img', 'input',
    'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})

ATTRIBUTE_ORDER = (
    'type', 'id', 'class', 'name', 'value',
    'href', 'src', 'srcset', 'form', 'action', 'method',
    'selected', 'checked', 'readonly', 'disabled', 'multiple',
    'size', 'maxlength', 'width', 'height', 'rows', 'cols',
    'alt', 'title', 'rel', 'media',
)

DATA_ATTRIBUTES = ('data', 'aria')

ClassSpec = Union[str, Iterable[str], Mapping[Any, str]]


class JsExpression:
    """
    A JavaScript expression that must not be quoted.

    Inside plugin options the expression is emitted as-is, so callbacks can be
    passed to the client library::

        plugin_options={'onCycleTo': JsExpression('function(el) { console.log(el); }')}
    """

    def __init__(self, expression: str):
        self.expression = expression

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"JsExpression({self.expression!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, JsExpression) and other.expression == self.expression

    def __hash__(self) -> int:
        return hash(self.expression)


def encode(text: Any) -> Markup:
    """HTML-escape text; ``Markup`` passes through unchanged"""
    if text is None:
        return Markup('')
    return escape(text)


def to_content(value: Any) -> Markup:
    """Turn tag content into markup: raw for ``Markup``, escaped for plain strings"""
    if value is None or value is False:
        return Markup('')
    return escape(value)


def html_encode_json(value: Any) -> str:
    """
    Encode a value as JSON that is safe inside a ``<script>`` block.

    ``<``, ``>``, ``&`` and ``'`` are emitted as unicode escapes, so the
    output cannot close the surrounding script tag. ``JsExpression`` values
    are substituted unquoted after encoding.
    """
    expressions: Dict[str, str] = {}
    prepared = _extract_expressions(value, expressions)
    encoded = str(htmlsafe_json_dumps(prepared))
    for token, expression in expressions.items():
        encoded = encoded.replace(f'"{token}"', expression)
    return encoded


def _extract_expressions(value: Any, expressions: Dict[str, str]) -> Any:
    if isinstance(value, JsExpression):
        token = f'__materialserv_js_{len(expressions)}__'
        expressions[token] = value.expression
        return token
    if isinstance(value, Mapping):
        return {key: _extract_expressions(item, expressions) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_extract_expressions(item, expressions) for item in value]
    return value


def css_style_from_dict(style: Mapping[str, Any]) -> str:
    """Serialize ``{'color': 'red'}`` as ``color: red;``"""
    return ' '.join(f'{name}: {value};' for name, value in style.items() if value is not None)


def _escape_attribute(value: Any) -> str:
    return html.escape(str(value), quote=True)


def _unique(classes: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for name in classes:
        if name and name not in seen:
            seen.append(name)
    return seen


def _class_items(classes: Optional[ClassSpec]) -> List[Tuple[Any, str]]:
    """Normalize a class specification into ``(key, class)`` pairs; int keys are anonymous"""
    if not classes:
        return []
    if isinstance(classes, str):
        return list(enumerate(classes.split()))
    if isinstance(classes, Mapping):
        return [(key, name) for key, name in classes.items() if name]
    if isinstance(classes, (set, frozenset)):
        return list(enumerate(sorted(classes)))
    return list(enumerate(name for name in classes if name))


def class_names(classes: Optional[ClassSpec]) -> List[str]:
    """List the distinct class names of a class specification in render order"""
    return _unique(name for _, name in _class_items(classes))


def add_css_class(attributes: MutableMapping[str, Any], classes: ClassSpec) -> None:
    """
    Add CSS classes to an attribute dictionary.

    ``classes`` may be keyed by a logical name (``{'plugin': 'carousel'}``);
    a logical key that is already present is left alone, and anonymous class
    names are only added once, so repeated calls are idempotent.
    """
    merged: Dict[Any, str] = dict(_class_items(attributes.get('class')))
    next_index = max((key for key in merged if isinstance(key, int)), default=-1) + 1

    for key, name in _class_items(classes):
        if isinstance(key, int):
            if name not in merged.values():
                merged[next_index] = name
                next_index += 1
        elif key not in merged:
            merged[key] = name

    attributes['class'] = merged


def render_tag_attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    """Render an attribute dictionary, including the leading space"""
    if not attributes:
        return ''

    ordered: Dict[str, Any] = {name: attributes[name] for name in ATTRIBUTE_ORDER if name in attributes}
    for name, value in attributes.items():
        if name not in ordered:
            ordered[name] = value

    parts: List[str] = []
    for name, value in ordered.items():
        if isinstance(value, bool):
            if value:
                parts.append(f' {name}')
        elif value is None:
            continue
        elif name in DATA_ATTRIBUTES and isinstance(value, Mapping):
            for sub_name, sub_value in value.items():
                if isinstance(sub_value, bool):
                    if sub_value:
                        parts.append(f' {name}-{sub_name}')
                elif sub_value is None:
                    continue
                elif isinstance(sub_value, (Mapping, list, tuple)):
                    parts.append(f' {name}-{sub_name}="{_escape_attribute(json.dumps(sub_value))}"')
                else:
                    parts.append(f' {name}-{sub_name}="{_escape_attribute(sub_value)}"')
        elif name == 'class':
            names = class_names(value)
            if names:
                parts.append(f' class="{_escape_attribute(" ".join(names))}"')
        elif name == 'style':
            if isinstance(value, Mapping):
                value = css_style_from_dict(value)
            if value:
                parts.append(f' style="{_escape_attribute(value)}"')
        elif isinstance(value, (Mapping, list, tuple)):
            parts.append(f' {name}="{_escape_attribute(json.dumps(value))}"')
        else:
            parts.append(f' {name}="{_escape_attribute(value)}"')

    return ''.join(parts)


def begin_tag(name: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
    return f'<{name}{render_tag_attributes(attributes)}>'


def end_tag(name: str) -> str:
    return f'</{name}>'


def tag(name: str, content: Any = '', attributes: Optional[Mapping[str, Any]] = None) -> str:
    """Render a complete tag; void elements get no content and no closing tag"""
    opening = begin_tag(name, attributes)
    if name.lower() in VOID_ELEMENTS:
        return opening
    return f'{opening}{"" if content is None else content}{end_tag(name)}'


def img(src: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
    """Render an ``<img>`` tag; ``alt`` defaults to an empty string"""
    attributes = dict(attributes or {})
    attributes['src'] = src
    attributes.setdefault('alt', '')
    return tag('img', '', attributes)


__all__ = [
    'JsExpression', 'Markup', 'encode', 'to_content', 'html_encode_json',
    'css_style_from_dict', 'class_names', 'add_css_class', 'render_tag_attributes',
    'begin_tag', 'end_tag', 'tag', 'img', 'VOID_ELEMENTS',
]
