"""
Asset bundles for the client-side component library.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin, urlparse

from materialserv.config import AssetConfig


@dataclass
class AssetBundle:
    """A named group of CSS and JS files registered together on a page"""
    name: str
    base_url: str = ''
    css: List[str] = field(default_factory=list)
    js: List[str] = field(default_factory=list)
    depends: List['AssetBundle'] = field(default_factory=list)

    def get_url(self, path: str) -> str:
        """Resolve a bundle file against the bundle's base URL"""
        if urlparse(path).scheme or path.startswith('//'):
            return path
        if not self.base_url:
            return path
        return urljoin(self.base_url.rstrip('/') + '/', path.lstrip('/'))

    def css_urls(self) -> List[str]:
        return [self.get_url(path) for path in self.css]

    def js_urls(self) -> List[str]:
        return [self.get_url(path) for path in self.js]


MATERIALIZE_BUNDLE = 'materialize'


def materialize_asset(config: Optional[AssetConfig] = None) -> AssetBundle:
    """Build the Materialize CSS/JS bundle from the asset configuration"""
    config = config or AssetConfig()
    return AssetBundle(
        name=MATERIALIZE_BUNDLE,
        base_url=config.base_url,
        css=list(config.css),
        js=list(config.js),
    )


__all__ = ['AssetBundle', 'materialize_asset', 'MATERIALIZE_BUNDLE']
