"""
Materialserv Widgets

Server-side wrappers for Materialize components. Each widget renders its
markup and registers the matching ``M.<Plugin>.init()`` call on the page's
``View``.
"""

from .base import BaseWidget, PluginBinding, NO_INIT
from .carousel import Carousel
from .collapsible import Collapsible
from .materialbox import MaterialBox
from .parallax import Parallax
from .slider import Slider

__all__ = [
    'BaseWidget', 'PluginBinding', 'NO_INIT',
    'Carousel', 'Collapsible', 'MaterialBox', 'Parallax', 'Slider',
]
