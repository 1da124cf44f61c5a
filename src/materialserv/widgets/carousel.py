"""
Carousel widget.

An image slider or an item carousel with arbitrary HTML content::

    Carousel(
        view,
        item_options={'class': 'amber white-text'},
        items=[
            {'content': Markup('<img src="/img/1.jpg">')},
            {'content': Markup('<h2>Heading</h2><p>Arbitrary content</p>'),
             'options': {'class': 'carousel-item-override'}},
        ],
        fixed_item={'tag': 'p', 'content': 'Some content'},
        navigation=[{'content': 'Prev'}, {'content': 'Next'}],
        full_width=True,
    )

See https://materializecss.com/carousel.html
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from materialserv.exceptions import InvalidConfigError
from materialserv.utils.collections import get_value, remove
from materialserv.utils.html import JsExpression, add_css_class, begin_tag, end_tag, tag, to_content
from materialserv.view import Position, View
from materialserv.widgets.base import BaseWidget, item_attributes, item_option, js_string, mapping_option

logger = logging.getLogger(__name__)

ITEM_KEYS = ('tag', 'content')


class Carousel(BaseWidget):
    """Materialize carousel with an optional fixed item and prev/next navigation"""

    plugin_name = 'Carousel'
    plugin_selector = '.carousel'
    default_plugin_options = {
        'duration': 200,
        'dist': -100,
        'shift': 0,
        'padding': 0,
        'numVisible': 5,
        'fullWidth': False,
        'indicators': False,
        'noWrap': False,
        'onCycleTo': None,
    }

    # keyword argument -> plugin option
    plugin_fields = {
        'duration': 'duration',
        'dist': 'dist',
        'shift': 'shift',
        'padding': 'padding',
        'num_visible': 'numVisible',
        'full_width': 'fullWidth',
        'indicators': 'indicators',
        'no_wrap': 'noWrap',
        'on_cycle_to': 'onCycleTo',
    }

    def __init__(self, view: View, *,
                 items: Optional[Sequence[Mapping[str, Any]]] = None,
                 item_options: Optional[Mapping[str, Any]] = None,
                 carousel_options: Optional[Mapping[str, Any]] = None,
                 fixed_item: Union[bool, Mapping[str, Any], None] = False,
                 navigation: Union[bool, Sequence[Any], None] = False,
                 navigation_options: Optional[Mapping[str, Any]] = None,
                 duration: Optional[int] = None,
                 dist: Optional[int] = None,
                 shift: Optional[int] = None,
                 padding: Optional[int] = None,
                 num_visible: Optional[int] = None,
                 full_width: Optional[bool] = None,
                 indicators: Optional[bool] = None,
                 no_wrap: Optional[bool] = None,
                 on_cycle_to: Union[str, JsExpression, None] = None,
                 **kwargs):
        self.items: List[Dict[str, Any]] = [
            item_option(item, f"Carousel items[{position}]") for position, item in enumerate(items or [])
        ]
        self.item_options = mapping_option(item_options, 'Carousel item_options')
        self.carousel_options = mapping_option(carousel_options, 'Carousel carousel_options')
        if fixed_item is True:
            raise InvalidConfigError("Carousel fixed_item must be False or a mapping, got True")
        self.fixed_item = item_option(fixed_item, 'Carousel fixed_item') if fixed_item else False
        self.navigation = navigation
        self.navigation_options = mapping_option(navigation_options, 'Carousel navigation_options')
        self._plugin_values = {
            'duration': duration,
            'dist': dist,
            'shift': shift,
            'padding': padding,
            'num_visible': num_visible,
            'full_width': full_width,
            'indicators': indicators,
            'no_wrap': no_wrap,
            'on_cycle_to': JsExpression(on_cycle_to) if isinstance(on_cycle_to, str) else on_cycle_to,
        }
        super().__init__(view, **kwargs)

    def init(self) -> None:
        for field_name, option in self.plugin_fields.items():
            value = self._plugin_values[field_name]
            if value is not None:
                self.plugin.set_option(option, value)

        add_css_class(self.carousel_options, {'plugin': 'carousel'})
        full_width = self._plugin_values['full_width']
        if full_width is None:
            full_width = self.plugin.get_option('fullWidth', False)
        if full_width:
            add_css_class(self.carousel_options, {'fullwidth': 'carousel-slider'})

        self.navigation = self._normalize_navigation(self.navigation)

        super().init()

        if self.navigation:
            self.view.register_js(self.navigation_script(), Position.END)

    def _normalize_navigation(self, navigation) -> Union[bool, List[Dict[str, Any]]]:
        if not navigation:
            return False
        if isinstance(navigation, (str, Mapping)) or not isinstance(navigation, Sequence) or len(navigation) != 2:
            logger.warning(
                "Carousel #%s: navigation needs exactly two descriptors (prev, next); navigation omitted",
                self.id,
            )
            return False
        return [
            item_option(descriptor, f"Carousel navigation[{position}]")
            if isinstance(descriptor, Mapping) else {'content': descriptor}
            for position, descriptor in enumerate(navigation)
        ]

    def navigation_script(self) -> str:
        namespace = self.view.config.widgets.js_namespace
        return "\n".join([
            "document.addEventListener('DOMContentLoaded', function() {",
            f"var root = document.getElementById({js_string(self.id)});",
            "var carousel = function() {"
            f"return {namespace}.Carousel.getInstance(root.querySelector('.carousel'));"
            "};",
            "root.querySelector('.carousel-prev').addEventListener('click', "
            "function(e) {e.preventDefault(); carousel().prev();});",
            "root.querySelector('.carousel-next').addEventListener('click', "
            "function(e) {e.preventDefault(); carousel().next();});",
            "});",
        ])

    def render(self) -> str:
        options = dict(self.carousel_options)
        carousel_tag = remove(options, 'tag', 'div')
        carousel = [
            begin_tag(carousel_tag, options),
            self.render_fixed_item(),
            self.render_items(),
            end_tag(carousel_tag),
        ]
        return self.render_container(
            '\n'.join(part for part in carousel if part),
            self.render_navigation(),
        )

    def render_items(self) -> str:
        return '\n'.join(self.render_item(item) for item in self.items)

    def render_item(self, item: Mapping[str, Any]) -> str:
        item_tag = get_value(item, 'tag', 'div')
        content = get_value(item, 'content', '')
        options = item_attributes(item, ITEM_KEYS, self.item_options)
        add_css_class(options, {'item': 'carousel-item'})
        return tag(item_tag, to_content(content), options)

    def render_fixed_item(self) -> str:
        if self.fixed_item is False:
            return ''

        item_tag = get_value(self.fixed_item, 'tag', 'div')
        content = get_value(self.fixed_item, 'content', '')
        options = item_attributes(self.fixed_item, ITEM_KEYS)
        add_css_class(options, {'fixed-item': 'carousel-fixed-item'})
        return tag(item_tag, to_content(content), options)

    def render_navigation(self) -> str:
        if not self.navigation:
            return ''

        controls = []
        for descriptor, css_class in zip(self.navigation, ('carousel-prev', 'carousel-next')):
            control_tag = get_value(descriptor, 'tag', 'a')
            options = item_attributes(descriptor, ITEM_KEYS)
            if control_tag == 'a':
                options.setdefault('href', '#!')
            add_css_class(options, {'navigation': css_class})
            controls.append(tag(control_tag, to_content(get_value(descriptor, 'content', '')), options))

        options = dict(self.navigation_options)
        add_css_class(options, {'widget': 'carousel-navigation'})
        return tag('div', '\n'.join(controls), options)


__all__ = ['Carousel']
