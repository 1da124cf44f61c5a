"""
Parallax: an image container whose background image scrolls at a different
speed than the foreground.

See https://materializecss.com/parallax.html
"""

from typing import Any, Mapping, Optional

from materialserv.utils.html import begin_tag, end_tag, img
from materialserv.view import View
from materialserv.widgets.base import BaseWidget, mapping_option, resolve_image


class Parallax(BaseWidget):
    plugin_name = 'Parallax'
    plugin_selector = '.parallax'

    def __init__(self, view: View, *,
                 image: Optional[str] = None,
                 image_options: Optional[Mapping[str, Any]] = None,
                 **kwargs):
        self.image = image
        self.image_options = mapping_option(image_options, 'Parallax image_options')
        super().__init__(view, **kwargs)

    def init(self) -> None:
        self.image = resolve_image('Parallax', self.image, self.image_options)
        super().init()

    def render(self) -> str:
        return self.render_container(
            begin_tag('div', {'class': 'parallax-container'}),
            begin_tag('div', {'class': 'parallax'}),
            img(self.image, self.image_options),
            end_tag('div'),
            end_tag('div'),
        )


__all__ = ['Parallax']
