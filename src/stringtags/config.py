# src/stringtags/config.py
import configparser
from pathlib import Path
from typing import Any, Optional, Union

_BOOL_KEYS = {
    'recursive', 'remove_null_tags', 'entity_encode', 'entity_decode',
}


class Config:
    """Configuration manager for stringtags"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config = configparser.ConfigParser()
        if config_path is None:
            self.config_path = Path(__file__).parent.parent / "config.ini"
        else:
            self.config_path = Path(config_path)

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding='utf-8')

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('tags')
        self.config.set('tags', 'tag_open', '{')
        self.config.set('tags', 'tag_close', '}')
        self.config.set('tags', 'recursive', 'false')
        self.config.set('tags', 'remove_null_tags', 'true')
        self.config.set('tags', 'entity_encode', 'false')
        self.config.set('tags', 'entity_decode', 'false')
        self.config.set('tags', 'max_depth', '10')

        self.config.add_section('translation')
        self.config.set('translation', 'default_locale', 'en')
        self.config.set('translation', 'catalog_dir', '')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            # raw: '{' and '}' must not go through interpolation
            value = self.config.get(section, key, raw=True)
            if section == 'tags':
                if key in _BOOL_KEYS:
                    return value.strip().lower() in ('true', 'yes', 'on', '1')
                elif key == 'max_depth':
                    return int(value)
            elif section == 'translation':
                if key == 'catalog_dir':
                    return Path(value) if value.strip() else None
            elif section == 'logging':
                if key == 'log_level':
                    return value.strip().upper()

            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

# Global config instance
config = Config()
