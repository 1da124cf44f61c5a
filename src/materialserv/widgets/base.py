"""
Materialserv Widgets Core

Shared widget lifecycle and the Materialize plugin binding.

Every widget is built in two steps inside its constructor:

1. an id is assigned to the container (caller supplied or generated by the view),
2. :meth:`BaseWidget.init` normalizes the configuration and registers the
   client-side plugin on the view.

:meth:`BaseWidget.render` then produces the markup. Initialization errors are
raised before any markup is produced.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from markupsafe import Markup

from materialserv.assets import materialize_asset
from materialserv.exceptions import InvalidConfigError
from materialserv.utils.collections import merge, remove
from materialserv.utils.html import JsExpression, begin_tag, end_tag, html_encode_json
from materialserv.view import Position, View

logger = logging.getLogger(__name__)

# Pass as ``plugin_options`` to render the markup without the init script
NO_INIT = False

PluginOptions = Union[Dict[str, Any], bool]


def js_string(value: str) -> str:
    """Quote a value as a single-quoted JavaScript string literal"""
    escaped = (
        str(value)
        .replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
        .replace('\u2028', '\\u2028')
        .replace('\u2029', '\\u2029')
        .replace('</', '<\\/')
    )
    return f"'{escaped}'"


@dataclass
class PluginBinding:
    """
    A Materialize plugin attached to a widget's container element.

    ``options`` is forwarded to ``M.<name>.init()``; set it to ``NO_INIT`` to
    skip initialization. ``events`` maps DOM event names to handler
    expressions, which are inserted into the page verbatim.
    """
    name: str
    selector: Optional[str] = None
    options: PluginOptions = field(default_factory=dict)
    events: Dict[str, Union[str, JsExpression]] = field(default_factory=dict)

    @property
    def enabled(self) -> bool:
        return self.options is not NO_INIT

    def set_option(self, key: str, value: Any) -> None:
        if self.enabled:
            self.options[key] = value

    def get_option(self, key: str, default: Any = None) -> Any:
        if not self.enabled:
            return default
        return self.options.get(key, default)

    def init_script(self, element_id: str, namespace: str = 'M') -> Optional[str]:
        if not self.enabled:
            return None

        selector = self.selector if self.selector is not None else f"#{element_id}"
        options = html_encode_json(self.options) if self.options else '{}'
        return (
            "document.addEventListener('DOMContentLoaded', function() {"
            f"{namespace}.{self.name}.init("
            f"document.getElementById({js_string(element_id)}).querySelectorAll({js_string(selector)}), "
            f"{options});"
            "});"
        )

    def events_script(self, element_id: str) -> Optional[str]:
        if not self.events:
            return None

        lines = [f"var elem = document.getElementById({js_string(element_id)});"]
        for event, handler in self.events.items():
            lines.append(f"elem.addEventListener({js_string(event)}, {handler});")
        return "(function() {\n" + "\n".join(lines) + "\n})();"

    def register(self, view: View, element_id: str) -> None:
        """Queue the Materialize bundle, the init script and the event handlers"""
        view.register_asset_bundle(materialize_asset(view.config.assets))

        script = self.init_script(element_id, view.config.widgets.js_namespace)
        if script is not None:
            view.register_js(script, Position.END)

        script = self.events_script(element_id)
        if script is not None:
            view.register_js(script, Position.END)

        logger.debug(
            "Registered plugin %s on #%s", self.name, element_id,
            extra={'structured_data': {'plugin': self.name, 'element_id': element_id,
                                       'init': self.enabled, 'events': list(self.events)}},
        )


def _type_name(value: Any) -> str:
    return type(value).__name__


def mapping_option(value: Any, name: str) -> Dict[str, Any]:
    """Deep copy of a mapping option; an unset option becomes an empty dict"""
    if value is None or value is False:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidConfigError(f"{name} must be a mapping, got {_type_name(value)}")
    return merge(value)


def item_option(item: Any, name: str, nested: Iterable[str] = ('options',)) -> Dict[str, Any]:
    """
    Deep copy of one list item.

    The item itself and each of its ``nested`` attribute bags must be
    mappings; anything else raises ``InvalidConfigError`` naming the field.
    """
    if not isinstance(item, Mapping):
        raise InvalidConfigError(f"{name} must be a mapping, got {_type_name(item)}")
    for key in nested:
        value = item.get(key)
        if value is not None and value is not False and not isinstance(value, Mapping):
            raise InvalidConfigError(f"{name}.{key} must be a mapping, got {_type_name(value)}")
    return merge(item)


def item_attributes(item: Mapping[str, Any], recognized: Iterable[str],
                    defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the HTML attributes of a list item.

    Widget-level defaults are merged with the item keys the widget does not
    recognize and finally with the item's own ``options``.
    """
    recognized = set(recognized) | {'options'}
    passthrough = {key: value for key, value in item.items() if key not in recognized}
    return merge(defaults, passthrough, item.get('options'))


def resolve_image(widget: str, image: Optional[str], image_options: Dict[str, Any]) -> str:
    """
    Return the image source of an image widget.

    ``image`` wins; otherwise ``src`` is taken out of ``image_options``.
    """
    src = remove(image_options, 'src')
    if image:
        return image
    if not src:
        raise InvalidConfigError(f"{widget}: image src must be defined")
    return src


class BaseWidget:
    """Base class for all Materialize widgets"""

    plugin_name: str = ''
    plugin_selector: Optional[str] = None
    default_plugin_options: Dict[str, Any] = {}

    def __init__(self, view: View, *, id: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 plugin_options: Optional[PluginOptions] = None,
                 plugin_events: Optional[Mapping[str, Union[str, JsExpression]]] = None,
                 **kwargs):
        if kwargs:
            raise InvalidConfigError(
                f"Unknown {self.__class__.__name__} option(s): {', '.join(sorted(kwargs))}")

        widget = self.__class__.__name__
        self.view = view
        self.options: Dict[str, Any] = mapping_option(options, f"{widget} options")

        if plugin_options is NO_INIT:
            resolved: PluginOptions = NO_INIT
        else:
            resolved = merge(self.default_plugin_options,
                             mapping_option(plugin_options, f"{widget} plugin_options"))
        events = mapping_option(plugin_events, f"{widget} plugin_events")

        if id is not None:
            self.options['id'] = id
        if not self.options.get('id'):
            self.options['id'] = view.next_id()

        self.plugin = PluginBinding(
            name=self.plugin_name,
            selector=self.plugin_selector,
            options=resolved,
            events=events,
        )

        self.init()

    @property
    def id(self) -> str:
        return self.options['id']

    @property
    def plugin_options(self) -> PluginOptions:
        return self.plugin.options

    def init(self) -> None:
        """Normalize the configuration and register the client-side plugin"""
        self.register_plugin()

    def register_plugin(self) -> None:
        self.plugin.register(self.view, self.id)

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    def render_container(self, *parts: str) -> str:
        """Wrap rendered parts in the container tag (``options['tag']``, default ``div``)"""
        options = dict(self.options)
        container = remove(options, 'tag', 'div')
        html = [begin_tag(container, options)]
        html.extend(part for part in parts if part)
        html.append(end_tag(container))
        return '\n'.join(html)

    @classmethod
    def widget(cls, view: View, **config) -> str:
        """Create, initialize and render a widget in one call"""
        return cls(view, **config).render()

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> Markup:
        return Markup(self.render())


__all__ = [
    'BaseWidget', 'PluginBinding', 'NO_INIT', 'mapping_option', 'item_option',
    'item_attributes', 'resolve_image', 'js_string',
]
