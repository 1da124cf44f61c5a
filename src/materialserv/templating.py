"""
Jinja2 integration.

Widgets are exposed to templates as functions that render into the page's
``View``. The ``page`` helpers emit placeholders which are replaced once the
whole template has rendered, so widgets further down the template still get
their assets into the head::

    <head>{{ page.head() }}</head>
    <body>
      {{ page.begin_body() }}
      {{ carousel(items=slides, full_width=True) }}
      {{ page.end_body() }}
    </body>
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import jinja2
from markupsafe import Markup

from materialserv.config import MaterializeConfig
from materialserv.view import View
from materialserv.widgets import Carousel, Collapsible, MaterialBox, Parallax, Slider

PLACEHOLDER_HEAD = '<![CDATA[MATERIALSERV-BLOCK-HEAD]]>'
PLACEHOLDER_BODY_BEGIN = '<![CDATA[MATERIALSERV-BLOCK-BODY-BEGIN]]>'
PLACEHOLDER_BODY_END = '<![CDATA[MATERIALSERV-BLOCK-BODY-END]]>'

WIDGETS = {
    'carousel': Carousel,
    'collapsible': Collapsible,
    'materialbox': MaterialBox,
    'parallax': Parallax,
    'slider': Slider,
}


class PageHelpers:
    """Placeholders for the page regions filled from the view"""

    def head(self) -> Markup:
        return Markup(PLACEHOLDER_HEAD)

    def begin_body(self) -> Markup:
        return Markup(PLACEHOLDER_BODY_BEGIN)

    def end_body(self) -> Markup:
        return Markup(PLACEHOLDER_BODY_END)


class WidgetTemplateEngine:
    """Jinja2 environment with the Materialize widgets as template functions"""

    def __init__(self, config: Optional[MaterializeConfig] = None, **env_options):
        self.config = config or MaterializeConfig()
        env_options.setdefault('autoescape', True)
        self.env = jinja2.Environment(**env_options)

    def widget_functions(self, view: View) -> Dict[str, Callable[..., Markup]]:
        def bind(widget_class):
            def render_widget(**config) -> Markup:
                return Markup(widget_class.widget(view, **config))
            render_widget.__name__ = widget_class.__name__
            return render_widget

        return {name: bind(widget_class) for name, widget_class in WIDGETS.items()}

    def render_string(self, source: str, view: Optional[View] = None, **context) -> str:
        """Render a template string as one page"""
        return self._render(self.env.from_string(source), view, context)

    def render_file(self, path: Union[str, Path], view: Optional[View] = None, **context) -> str:
        """Render a template file as one page"""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {path}")
        return self._render(self.env.from_string(path.read_text()), view, context)

    def _render(self, template: jinja2.Template, view: Optional[View], context: Dict[str, Any]) -> str:
        view = view or View(self.config)
        context = {**self.widget_functions(view), 'page': PageHelpers(), 'view': view, **context}
        html = template.render(**context)
        return (
            html
            .replace(PLACEHOLDER_HEAD, view.render_head())
            .replace(PLACEHOLDER_BODY_BEGIN, view.render_body_begin())
            .replace(PLACEHOLDER_BODY_END, view.render_body_end())
        )


__all__ = ['WidgetTemplateEngine', 'PageHelpers', 'WIDGETS']
