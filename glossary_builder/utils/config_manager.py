"""
Configuration manager for loading and saving settings from YAML/JSON files.
"""
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict, fields
import os
from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError
from ..core.models import (
    DEFAULT_SITE_TITLE, INDEX_PAGE_NAME, PAGE_EXTENSION, DuplicateTermPolicy
)


@dataclass
class ParserConfig:
    """Configuration for the glossary source parser."""
    encoding: str = "utf-8"
    duplicate_policy: str = DuplicateTermPolicy.LAST_WINS.value


@dataclass
class LinkerConfig:
    """Configuration for definition cross-linking."""
    separators: str = ", \t;."
    link_self: bool = True


@dataclass
class OutputConfig:
    """Configuration for rendered pages."""
    output_dir: str = "site"
    page_extension: str = PAGE_EXTENSION
    index_name: str = INDEX_PAGE_NAME
    site_title: str = DEFAULT_SITE_TITLE
    index_heading: str = "Index"
    encoding: str = "utf-8"
    overwrite: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "DEBUG"
    console_level: str = "INFO"
    file_logging: bool = False
    max_bytes: int = 10_000_000
    backup_count: int = 5
    use_colors: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    parser: ParserConfig = field(default_factory=ParserConfig)
    linker: LinkerConfig = field(default_factory=LinkerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'parser': ParserConfig,
    'linker': LinkerConfig,
    'output': OutputConfig,
    'logging': LoggingConfig,
}

CONFIG_TEMPLATE = """# Glossary Builder Configuration

# Source parsing
parser:
  encoding: utf-8             # Encoding of the glossary text file
  duplicate_policy: last_wins # last_wins or reject

# Cross-linking
linker:
  separators: ", \\t;."       # Characters that split definition words
  link_self: true             # Link a term inside its own definition

# Rendered pages
output:
  output_dir: site            # Default output directory
  page_extension: .html       # Extension for every page
  index_name: index           # Name of the index page
  site_title: Glossary        # Title and heading of the index page
  index_heading: Index        # Heading above the term list
  encoding: utf-8             # Encoding of written pages
  overwrite: true             # Replace existing pages

# Logging
logging:
  log_dir: logs               # Log directory
  log_level: DEBUG            # File output level
  console_level: INFO         # Console output level
  file_logging: false         # Write a rotating log file
  max_bytes: 10000000         # Max log file size (10MB)
  backup_count: 5             # Number of backup files
  use_colors: true            # Colored console output
"""


class ConfigManager:
    """
    Configuration manager for loading/saving application settings.
    Supports YAML and JSON formats, environment variables, and defaults.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        A missing config file leaves the defaults in place.

        Args:
            config_path: Path to config file (YAML or JSON)
        """
        self.config_path = Path(config_path) if config_path else Path("glossary.yaml")
        self.config: AppConfig = AppConfig()

        load_dotenv()

        if self.config_path.exists():
            self.load()
        else:
            self._apply_env_vars()
            self.validate()

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: On unsupported format, unknown keys or bad values
        """
        if not self.config_path.exists():
            return self.config

        if self.config_path.suffix in ['.yaml', '.yml']:
            data = self._load_yaml()
        elif self.config_path.suffix == '.json':
            data = self._load_json()
        else:
            raise ConfigurationError(
                f"Unsupported config format: {self.config_path.suffix}",
                component="config"
            )

        self.config = self._parse_config(data)
        self._apply_env_vars()
        self.validate()

        return self.config

    def save(self, config: Optional[AppConfig] = None):
        """
        Save configuration to file.

        Args:
            config: Config to save (uses current if None)
        """
        if config:
            self.config = config

        data = asdict(self.config)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.suffix in ['.yaml', '.yml']:
            self._save_yaml(data)
        elif self.config_path.suffix == '.json':
            self._save_json(data)
        else:
            raise ConfigurationError(
                f"Unsupported config format: {self.config_path.suffix}",
                component="config"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot notation key.

        Args:
            key: Configuration key (e.g., 'output.site_title', 'linker.link_self')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config

        for part in key.split('.'):
            if hasattr(value, part):
                value = getattr(value, part)
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot notation key.

        Args:
            key: Configuration key
            value: Value to set

        Raises:
            KeyError: If the key does not name a config field
        """
        parts = key.split('.')
        obj = self.config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Invalid config key: {key}")

        if not hasattr(obj, parts[-1]):
            raise KeyError(f"Invalid config key: {key}")
        setattr(obj, parts[-1], value)

    def validate(self):
        """
        Check field types and values.

        Raises:
            ConfigurationError: If a value is invalid
        """
        for name in _SECTIONS:
            self._check_types(name, getattr(self.config, name))

        policies = [p.value for p in DuplicateTermPolicy]
        if self.config.parser.duplicate_policy not in policies:
            raise ConfigurationError(
                f"Invalid duplicate_policy: {self.config.parser.duplicate_policy}",
                component="parser",
                allowed=policies
            )
        if not self.config.linker.separators:
            raise ConfigurationError("Separator set cannot be empty", component="linker")
        if not self.config.output.index_name:
            raise ConfigurationError("index_name cannot be empty", component="output")

    @staticmethod
    def _check_types(name: str, section: Any):
        """Reject values whose type differs from the field's declared type."""
        for f in fields(section):
            value = getattr(section, f.name)
            # bool is a subclass of int
            if f.type is int:
                valid = isinstance(value, int) and not isinstance(value, bool)
            else:
                valid = isinstance(value, f.type)
            if not valid:
                raise ConfigurationError(
                    f"'{name}.{f.name}' must be of type {f.type.__name__}, "
                    f"got {type(value).__name__}",
                    component=name
                )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML config file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", component="config") from e

    def _load_json(self) -> Dict[str, Any]:
        """Load JSON config file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON: {e}", component="config") from e

    def _save_yaml(self, data: Dict[str, Any]):
        """Save config as YAML."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

    def _save_json(self, data: Dict[str, Any]):
        """Save config as JSON."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _parse_config(self, data: Dict[str, Any]) -> AppConfig:
        """Parse dictionary to AppConfig."""
        if not isinstance(data, dict):
            raise ConfigurationError("Config root must be a mapping", component="config")

        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise ConfigurationError(
                f"Unknown config sections: {', '.join(sorted(unknown))}",
                component="config"
            )

        config = AppConfig()
        for name, section_class in _SECTIONS.items():
            if name not in data:
                continue
            section = data[name] or {}
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Section '{name}' must be a mapping", component=name
                )
            allowed = {f.name for f in fields(section_class)}
            bad = set(section) - allowed
            if bad:
                raise ConfigurationError(
                    f"Unknown keys in '{name}': {', '.join(sorted(bad))}",
                    component=name
                )
            setattr(config, name, section_class(**section))

        return config

    def _apply_env_vars(self):
        """Override config with environment variables."""
        if os.getenv('GLOSSARY_LOG_LEVEL'):
            self.config.logging.console_level = os.getenv('GLOSSARY_LOG_LEVEL')

        if os.getenv('GLOSSARY_OUTPUT_DIR'):
            self.config.output.output_dir = os.getenv('GLOSSARY_OUTPUT_DIR')

        if os.getenv('GLOSSARY_ENCODING'):
            self.config.parser.encoding = os.getenv('GLOSSARY_ENCODING')
            self.config.output.encoding = os.getenv('GLOSSARY_ENCODING')

        if os.getenv('GLOSSARY_DUPLICATES'):
            self.config.parser.duplicate_policy = os.getenv('GLOSSARY_DUPLICATES').lower()


def write_config_template(output_path: Path):
    """Write the commented configuration template to output_path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(CONFIG_TEMPLATE)
