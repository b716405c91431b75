"""Configuration management for whatthecommit."""
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from rich.console import Console
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".whatthecommit.toml"
CONFIG_SECTION = "whatthecommit"

console = Console(stderr=True)

STRING_FIELDS = ['names_file', 'messages_file', 'log_file', 'log_directory']
BOOL_FIELDS = ['always_log']
INT_FIELDS = ['seed']
LOG_PATH_FIELDS = ['log_file', 'log_directory']


class Config(BaseModel):
    """Configuration settings for whatthecommit.

    This class defines all configurable options that can be set either
    via the config file, environment variables or command line arguments.
    """

    names_file: Optional[str] = Field(
        default=None,
        description="File with one name per line (defaults to the built-in list)"
    )

    messages_file: Optional[str] = Field(
        default=None,
        description="File with one commit message template per line (defaults to the built-in list)"
    )

    seed: Optional[int] = Field(
        default=None,
        description="Seed for the random generator, for reproducible output"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write generated messages to a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatically generated log files"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and cap the length of a string setting."""
        if not value:
            return value

        # Remove control characters and null bytes
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a log path is safe (relative, no path traversal)."""
        if not path:
            return False

        if '..' in Path(path).parts or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @staticmethod
    def read_file_settings(config_dir: Path) -> Dict[str, Any]:
        """Read the raw settings table of the config file.

        Settings may sit at the top level or under a [whatthecommit] table.
        Returns an empty dict when there is no config file.
        """
        config_path = config_dir / DEFAULT_CONFIG_FILENAME
        if not config_path.exists():
            return {}

        with config_path.open('rb') as f:
            config_data = tomli.load(f)

        return config_data.get(CONFIG_SECTION, config_data)

    @classmethod
    def load(cls, config_dir: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            config_dir: Directory holding the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = config_dir / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            config_section = cls.read_file_settings(config_dir)

            for key in STRING_FIELDS:
                if key in config_section and isinstance(config_section[key], str):
                    config_section[key] = cls._sanitize_string(config_section[key])

            for key in LOG_PATH_FIELDS:
                if config_section.get(key) and not cls._is_safe_path(config_section[key]):
                    console.print(f"[yellow]Warning: Unsafe {key} path '{config_section[key]}', using default[/yellow]")
                    config_section[key] = None

            known = {k: v for k, v in config_section.items() if k in cls.model_fields}
            return cls(**known)
        except Exception as e:
            # If there's any error reading the config, use defaults
            console.print(f"[yellow]Warning: Error reading config file: {e}[/yellow]")
            return cls()

    def save(self, config_dir: Path) -> None:
        """Save configuration to the config file.

        Args:
            config_dir: Directory to write the config file to
        """
        config_path = config_dir / DEFAULT_CONFIG_FILENAME

        try:
            # TOML has no null, so unset values are left out
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            for key in LOG_PATH_FIELDS:
                if config_dict.get(key) and not self._is_safe_path(config_dict[key]):
                    console.print(f"[yellow]Warning: Unsafe {key} path '{config_dict[key]}', not saving[/yellow]")
                    del config_dict[key]

            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            console.print(f"[red]Error saving config file: {e}[/red]")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        log_directory (or the current directory). Otherwise, returns the
        configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = Path(".")
            if self.log_directory:
                if self._is_safe_path(self.log_directory):
                    directory = Path(self.log_directory)
                else:
                    console.print(f"[yellow]Warning: Unsafe log directory '{self.log_directory}', using current directory[/yellow]")
            return directory / f"wtc_log-{timestamp}.log"
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                console.print(f"[yellow]Warning: Unsafe log file path '{self.log_file}', logging disabled[/yellow]")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'WHAT_THE_COMMIT_NAMES_FILE': 'names_file',
            'WHAT_THE_COMMIT_MESSAGES_FILE': 'messages_file',
            'WHAT_THE_COMMIT_SEED': 'seed',
            'WHAT_THE_COMMIT_ALWAYS_LOG': 'always_log',
            'WHAT_THE_COMMIT_LOG_FILE': 'log_file',
            'WHAT_THE_COMMIT_LOG_DIRECTORY': 'log_directory',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in STRING_FIELDS:
                    value = self._sanitize_string(value)

                if field_name in BOOL_FIELDS:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                if field_name in INT_FIELDS:
                    try:
                        value = int(value)
                    except ValueError:
                        console.print(f"[yellow]Warning: Ignoring non-integer {env_var}={value!r}[/yellow]")
                        continue

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
