"""
MaterialBox: a lightweight lightbox variant to present images.

See https://materializecss.com/media.html#materialbox
"""

from typing import Any, Mapping, Optional, Union

from markupsafe import Markup

from materialserv.utils.html import add_css_class, encode, img
from materialserv.view import View
from materialserv.widgets.base import BaseWidget, mapping_option, resolve_image


class MaterialBox(BaseWidget):
    """
    Image that opens in a lightbox when clicked.

    The image source comes from ``image`` or from ``image_options['src']``;
    a missing source raises ``InvalidConfigError``. ``caption`` is stored in
    the image's ``data-caption`` attribute and HTML-encoded unless
    ``encode_caption`` is False or the caption is ``Markup``.
    """

    plugin_name = 'Materialbox'
    plugin_selector = '.materialboxed'

    def __init__(self, view: View, *,
                 image: Optional[str] = None,
                 image_options: Optional[Mapping[str, Any]] = None,
                 caption: Union[str, Markup, bool, None] = False,
                 encode_caption: bool = True,
                 **kwargs):
        self.image = image
        self.image_options = mapping_option(image_options, 'MaterialBox image_options')
        self.caption = caption
        self.encode_caption = encode_caption
        super().__init__(view, **kwargs)

    def init(self) -> None:
        self.image = resolve_image('MaterialBox', self.image, self.image_options)

        add_css_class(self.image_options, {'plugin': 'materialboxed'})
        if self.caption is not False and self.caption is not None:
            caption = encode(self.caption) if self.encode_caption else self.caption
            self.image_options['data-caption'] = str(caption)

        super().init()

    def render(self) -> str:
        return self.render_container(img(self.image, self.image_options))


__all__ = ['MaterialBox']
