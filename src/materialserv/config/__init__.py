"""
Materialserv Configuration System

Environment-driven settings for asset resolution, widget id generation
and logging.
"""

import os
from typing import List
from dataclasses import dataclass, field

from materialserv.exceptions import InvalidConfigError


def _env_bool(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


@dataclass
class AssetConfig:
    """Where the Materialize CSS/JS files are served from"""
    # URL prefix for locally served files
    static_url: str = field(default_factory=lambda: os.getenv('MATERIALSERV_STATIC_URL', '/static/materialize/'))

    # CDN settings
    use_cdn: bool = field(default_factory=lambda: _env_bool('MATERIALSERV_USE_CDN'))
    cdn_url: str = field(default_factory=lambda: os.getenv(
        'MATERIALSERV_CDN_URL', 'https://cdnjs.cloudflare.com/ajax/libs/materialize/1.0.0/'))

    css: List[str] = field(default_factory=lambda: _env_list('MATERIALSERV_CSS', 'css/materialize.min.css'))
    js: List[str] = field(default_factory=lambda: _env_list('MATERIALSERV_JS', 'js/materialize.min.js'))

    @property
    def base_url(self) -> str:
        return self.cdn_url if self.use_cdn else self.static_url


@dataclass
class WidgetConfig:
    """Widget id generation and client-side namespace"""
    id_prefix: str = field(default_factory=lambda: os.getenv('MATERIALSERV_ID_PREFIX', 'w'))
    js_namespace: str = field(default_factory=lambda: os.getenv('MATERIALSERV_JS_NAMESPACE', 'M'))


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = field(default_factory=lambda: os.getenv('MATERIALSERV_LOG_LEVEL', 'WARNING'))
    json_format: bool = field(default_factory=lambda: _env_bool('MATERIALSERV_LOG_JSON'))


@dataclass
class MaterializeConfig:
    """Main materialserv configuration"""
    assets: AssetConfig = field(default_factory=AssetConfig)
    widgets: WidgetConfig = field(default_factory=WidgetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.assets.use_cdn and not self.assets.cdn_url:
            raise InvalidConfigError("MATERIALSERV_CDN_URL must be set when the CDN is enabled")
        if not self.widgets.id_prefix:
            raise InvalidConfigError("Widget id prefix must not be empty")
        if not self.widgets.js_namespace.isidentifier():
            raise InvalidConfigError(
                f"Invalid JavaScript namespace: {self.widgets.js_namespace!r}")
        if self.logging.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise InvalidConfigError(f"Unknown log level: {self.logging.level!r}")


class ConfigPresets:
    """Configuration presets for different environments"""

    @staticmethod
    def development() -> MaterializeConfig:
        """Development configuration"""
        return MaterializeConfig(
            assets=AssetConfig(use_cdn=False),
            logging=LoggingConfig(level='DEBUG'),
        )

    @staticmethod
    def production() -> MaterializeConfig:
        """Production configuration"""
        return MaterializeConfig(
            assets=AssetConfig(use_cdn=True),
            logging=LoggingConfig(level='WARNING', json_format=True),
        )

    @staticmethod
    def testing() -> MaterializeConfig:
        """Testing configuration"""
        return MaterializeConfig(
            assets=AssetConfig(use_cdn=False, static_url='/static/materialize/'),
            widgets=WidgetConfig(id_prefix='w', js_namespace='M'),
            logging=LoggingConfig(level='ERROR'),
        )


def get_config_from_environment() -> MaterializeConfig:
    """Get configuration based on MATERIALSERV_ENV"""
    env = os.getenv('MATERIALSERV_ENV', '').lower()

    if env == 'production':
        return ConfigPresets.production()
    elif env == 'development':
        return ConfigPresets.development()
    elif env == 'testing':
        return ConfigPresets.testing()
    else:
        return MaterializeConfig()


__all__ = [
    'AssetConfig', 'WidgetConfig', 'LoggingConfig', 'MaterializeConfig',
    'ConfigPresets', 'get_config_from_environment',
]
