"""
Page rendering context.

A ``View`` collects everything widgets contribute to a page besides their own
markup: asset bundles (each registered once per page) and script fragments
tagged with the position they are emitted at. Create one per rendered page
and pass it to every widget.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from materialserv.assets import AssetBundle
from materialserv.config import MaterializeConfig
from materialserv.utils.html import tag

logger = logging.getLogger(__name__)


class Position(str, Enum):
    """Where a script fragment is emitted"""
    HEAD = "head"
    BEGIN = "begin"
    END = "end"


class View:
    """Per-page asset and script queues"""

    def __init__(self, config: Optional[MaterializeConfig] = None):
        self.config = config or MaterializeConfig()
        self.asset_bundles: Dict[str, AssetBundle] = {}
        self.js: Dict[Position, List[str]] = {position: [] for position in Position}
        self._js_keys: Dict[Position, Dict[str, int]] = {position: {} for position in Position}
        self._counter = 0

    def next_id(self) -> str:
        """Generate the next widget id for this page (``w0``, ``w1``, ...)"""
        widget_id = f"{self.config.widgets.id_prefix}{self._counter}"
        self._counter += 1
        return widget_id

    def register_asset_bundle(self, bundle: AssetBundle) -> AssetBundle:
        """Queue a bundle (and its dependencies) once; return the registered instance"""
        if bundle.name in self.asset_bundles:
            return self.asset_bundles[bundle.name]

        for dependency in bundle.depends:
            self.register_asset_bundle(dependency)

        self.asset_bundles[bundle.name] = bundle
        logger.debug("Registered asset bundle %s", bundle.name)
        return bundle

    def register_js(self, js: str, position: Position = Position.END, key: Optional[str] = None) -> None:
        """
        Queue a script fragment.

        Fragments registered without a key are always appended. A fragment
        registered with a key replaces an earlier fragment with the same key.
        """
        position = Position(position)
        fragments = self.js[position]
        if key is not None and key in self._js_keys[position]:
            fragments[self._js_keys[position][key]] = js
            return

        if key is not None:
            self._js_keys[position][key] = len(fragments)
        fragments.append(js)

    def css_files(self) -> List[str]:
        return [url for bundle in self.asset_bundles.values() for url in bundle.css_urls()]

    def js_files(self) -> List[str]:
        return [url for bundle in self.asset_bundles.values() for url in bundle.js_urls()]

    def _render_js_block(self, position: Position) -> str:
        fragments = self.js[position]
        if not fragments:
            return ''
        return tag('script', '\n' + '\n'.join(fragments) + '\n')

    def render_head(self) -> str:
        """Stylesheet links of every registered bundle plus head scripts"""
        lines = [tag('link', '', {'href': url, 'rel': 'stylesheet'}) for url in self.css_files()]
        lines.append(self._render_js_block(Position.HEAD))
        return '\n'.join(line for line in lines if line)

    def render_body_begin(self) -> str:
        return self._render_js_block(Position.BEGIN)

    def render_body_end(self) -> str:
        """Bundle scripts followed by the queued end-of-body fragments"""
        lines = [tag('script', '', {'src': url}) for url in self.js_files()]
        lines.append(self._render_js_block(Position.END))
        return '\n'.join(line for line in lines if line)

    def clear(self) -> None:
        """Forget all registered assets, scripts and the id counter"""
        self.asset_bundles.clear()
        for position in Position:
            self.js[position] = []
            self._js_keys[position] = {}
        self._counter = 0


__all__ = ['View', 'Position']
