"""
Collapsible widget: accordion elements that expand when clicked on.

Each item may define ``header`` and ``body``; ``header_options`` and
``body_options`` take HTML attributes plus an optional ``tag`` (default
``div``). ``active`` pre-opens an item. Keys the widget does not recognize are
rendered as attributes of the item's ``<li>``::

    Collapsible(
        view,
        type=Collapsible.TYPE_EXPANDABLE,
        items=[
            {'header': Markup('<i class="material-icons">filter_drama</i>First'),
             'body': 'Lorem ipsum dolor sit amet.'},
            {'header': 'Second', 'body': 'Consectetur adipiscing elit.',
             'body_options': {'tag': 'p'}, 'active': True},
        ],
    )

See https://materializecss.com/collapsible.html
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from materialserv.exceptions import InvalidConfigError
from materialserv.utils.collections import get_value, merge, remove
from materialserv.utils.html import add_css_class, begin_tag, end_tag, tag, to_content
from materialserv.view import View
from materialserv.widgets.base import BaseWidget, item_attributes, item_option, mapping_option

ITEM_KEYS = ('tag', 'header', 'body', 'header_options', 'body_options', 'active')
ITEM_OPTIONS = ('options', 'header_options', 'body_options')


class Collapsible(BaseWidget):
    """Materialize collapsible list"""

    TYPE_ACCORDION = 'accordion'
    TYPE_EXPANDABLE = 'expandable'
    TYPE_POPOUT = 'popout'
    TYPES = (TYPE_ACCORDION, TYPE_EXPANDABLE, TYPE_POPOUT)

    plugin_name = 'Collapsible'
    plugin_selector = '.collapsible'
    default_plugin_options = {
        'inDuration': 300,
        'outDuration': 300,
    }

    def __init__(self, view: View, *,
                 items: Optional[Sequence[Mapping[str, Any]]] = None,
                 collapsible_options: Optional[Mapping[str, Any]] = None,
                 type: str = TYPE_ACCORDION,
                 in_duration: Optional[int] = None,
                 out_duration: Optional[int] = None,
                 **kwargs):
        self.items: List[Dict[str, Any]] = [
            item_option(item, f"Collapsible items[{position}]", ITEM_OPTIONS)
            for position, item in enumerate(items or [])
        ]
        self.collapsible_options = mapping_option(collapsible_options, 'Collapsible collapsible_options')
        self.type = type
        self.in_duration = in_duration
        self.out_duration = out_duration
        super().__init__(view, **kwargs)

    def init(self) -> None:
        if self.type not in self.TYPES:
            raise InvalidConfigError(
                f"Collapsible type must be one of {', '.join(self.TYPES)}, got {self.type!r}")

        add_css_class(self.collapsible_options, {'widget': 'collapsible'})

        if self.type == self.TYPE_POPOUT:
            add_css_class(self.collapsible_options, {'popout': 'popout'})

        if self.type == self.TYPE_EXPANDABLE:
            self.plugin.set_option('accordion', False)

        if self.in_duration is not None:
            self.plugin.set_option('inDuration', self.in_duration)
        if self.out_duration is not None:
            self.plugin.set_option('outDuration', self.out_duration)

        super().init()

    def render(self) -> str:
        return self.render_container(tag('ul', self.render_items(), self.collapsible_options))

    def render_items(self) -> str:
        html = [self.render_item(item) for item in self.items]
        return '\n'.join(part for part in html if part)

    def render_item(self, item: Mapping[str, Any]) -> str:
        """Render one ``<li>``; an item without header and body renders as an empty string"""
        header = to_content(get_value(item, 'header'))
        body = to_content(get_value(item, 'body'))
        if not header and not body:
            return ''

        options = item_attributes(item, ITEM_KEYS)
        if get_value(item, 'active', False):
            add_css_class(options, {'active': 'active'})

        html = [begin_tag('li', options)]
        if header:
            header_options = merge(get_value(item, 'header_options'))
            header_tag = remove(header_options, 'tag', 'div')
            add_css_class(header_options, {'header': 'collapsible-header'})
            html.append(tag(header_tag, header, header_options))
        if body:
            body_options = merge(get_value(item, 'body_options'))
            body_tag = remove(body_options, 'tag', 'div')
            add_css_class(body_options, {'body': 'collapsible-body'})
            html.append(tag(body_tag, body, body_options))
        html.append(end_tag('li'))

        return '\n'.join(html)


__all__ = ['Collapsible']
