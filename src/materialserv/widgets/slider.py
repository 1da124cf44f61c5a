"""
Slider widget: a Materialize image slider with optional captions.

Each item defines ``image`` (image attributes including ``src``), an optional
``caption`` and ``options`` for its ``<li>``::

    Slider(
        view,
        item_options={'class': 'slide'},
        items=[
            {'image': {'src': '/img/1.jpg'}},
            {'image': {'src': '/img/2.jpg'},
             'caption': {'content': Markup('<h3>Caption</h3>'), 'align': Slider.CAPTION_ALIGN_RIGHT},
             'options': {'class': 'slide-override'}},
        ],
    )

See https://materializecss.com/media.html#slider
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from materialserv.exceptions import InvalidConfigError
from materialserv.utils.collections import get_value, merge, remove
from materialserv.utils.html import add_css_class, begin_tag, end_tag, img, tag, to_content
from materialserv.view import View
from materialserv.widgets.base import BaseWidget, item_attributes, item_option, mapping_option

ITEM_KEYS = ('image', 'caption')


class Slider(BaseWidget):
    """Materialize image slider"""

    CAPTION_ALIGN_LEFT = 'left-align'
    CAPTION_ALIGN_CENTER = 'center-align'
    CAPTION_ALIGN_RIGHT = 'right-align'
    CAPTION_ALIGNMENTS = (CAPTION_ALIGN_LEFT, CAPTION_ALIGN_CENTER, CAPTION_ALIGN_RIGHT)

    plugin_name = 'Slider'
    plugin_selector = '.slider'
    default_plugin_options = {
        'indicators': True,
        'height': 400,
        'duration': 500,
        'interval': 6000,
    }

    def __init__(self, view: View, *,
                 items: Optional[Sequence[Mapping[str, Any]]] = None,
                 slider_options: Optional[Mapping[str, Any]] = None,
                 item_options: Optional[Mapping[str, Any]] = None,
                 caption_options: Optional[Mapping[str, Any]] = None,
                 indicators: Optional[bool] = None,
                 fullscreen: bool = False,
                 height: Optional[int] = None,
                 duration: Optional[int] = None,
                 interval: Optional[int] = None,
                 **kwargs):
        self.items: List[Dict[str, Any]] = [
            item_option(item, f"Slider items[{position}]") for position, item in enumerate(items or [])
        ]
        self.slider_options = mapping_option(slider_options, 'Slider slider_options')
        self.item_options = mapping_option(item_options, 'Slider item_options')
        self.caption_options = mapping_option(caption_options, 'Slider caption_options')
        self.fullscreen = fullscreen
        self._plugin_values = {
            'indicators': indicators,
            'height': height,
            'duration': duration,
            'interval': interval,
        }
        super().__init__(view, **kwargs)

    def init(self) -> None:
        for position, item in enumerate(self.items):
            image = get_value(item, 'image')
            if image is not None and not isinstance(image, (str, Mapping)):
                raise InvalidConfigError(
                    f"Slider items[{position}].image must be a src string or a mapping, "
                    f"got {type(image).__name__}")
            caption = get_value(item, 'caption')
            if isinstance(caption, Mapping):
                item_option(caption, f"Slider items[{position}].caption")

            alignment = get_value(item, 'caption.align')
            if alignment and alignment not in self.CAPTION_ALIGNMENTS:
                raise InvalidConfigError(
                    f"Slider item {position}: caption align must be one of "
                    f"{', '.join(self.CAPTION_ALIGNMENTS)}, got {alignment!r}")

        add_css_class(self.slider_options, {'plugin': 'slider'})
        if self.fullscreen is True:
            add_css_class(self.slider_options, {'fullscreen': 'fullscreen'})

        for option, value in self._plugin_values.items():
            if value is not None:
                self.plugin.set_option(option, value)

        super().init()

    def render(self) -> str:
        return self.render_container(
            begin_tag('div', self.slider_options),
            self.render_slides(),
            end_tag('div'),
        )

    def render_slides(self) -> str:
        slides = [self.render_slide(slide) for slide in self.items]
        return tag('ul', '\n'.join(slides), {'class': 'slides'})

    def render_slide(self, slide: Mapping[str, Any]) -> str:
        """Render one ``<li>``; a slide without an image source renders as an empty ``<li>``"""
        image_options = get_value(slide, 'image', {})
        image_options = {'src': image_options} if isinstance(image_options, str) else merge(image_options)
        src = remove(image_options, 'src')

        options = item_attributes(slide, ITEM_KEYS, self.item_options)
        add_css_class(options, {'slide': 'slide-item'})

        if not src:
            return tag('li', '', options)

        html = [
            begin_tag('li', options),
            img(src, image_options),
            self.render_caption(get_value(slide, 'caption', False)),
            end_tag('li'),
        ]
        return '\n'.join(part for part in html if part)

    def render_caption(self, caption) -> str:
        if caption is False or caption is None:
            return ''
        if not isinstance(caption, Mapping):
            caption = {'content': caption}

        alignment = get_value(caption, 'align')
        options = merge(self.caption_options, get_value(caption, 'options'))
        add_css_class(options, {'caption': 'caption'})
        if alignment:
            add_css_class(options, {'align': alignment})

        return tag('div', to_content(get_value(caption, 'content', '')), options)


__all__ = ['Slider']
