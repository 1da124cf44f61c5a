"""
Materialserv - Materialize widgets for server-rendered pages

Widgets render HTML and queue the JavaScript that initializes the matching
Materialize component once the page has loaded.

Example:
    >>> from materialserv import View, Collapsible
    >>>
    >>> view = View()
    >>> html = Collapsible.widget(view, items=[{'header': 'First', 'body': 'Lorem ipsum'}])
    >>> footer = view.render_body_end()
"""

__version__ = "0.1.0"
__author__ = "Materialserv Team"

from materialserv.config import MaterializeConfig, get_config_from_environment
from materialserv.exceptions import MaterialservError, InvalidConfigError
from materialserv.assets import AssetBundle, materialize_asset
from materialserv.view import View, Position
from materialserv.utils.html import JsExpression, Markup
from materialserv.widgets import (
    BaseWidget, PluginBinding, NO_INIT,
    Carousel, Collapsible, MaterialBox, Parallax, Slider,
)
from materialserv.templating import WidgetTemplateEngine
from materialserv.log import configure_logging

__all__ = [
    "MaterializeConfig", "get_config_from_environment",
    "MaterialservError", "InvalidConfigError",
    "AssetBundle", "materialize_asset",
    "View", "Position",
    "JsExpression", "Markup",
    "BaseWidget", "PluginBinding", "NO_INIT",
    "Carousel", "Collapsible", "MaterialBox", "Parallax", "Slider",
    "WidgetTemplateEngine",
    "configure_logging",
]
