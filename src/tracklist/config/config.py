"""Configuration management for tracklist."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tracklist.config.file_ops import write_text_file
from tracklist.config.paths import default_config_path
from tracklist.config.settings import DEFAULT_PLAYLIST_FILE, PLAY_DEMO_LIMIT_DEFAULT
from tracklist.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Playlist file used by save/load/quit when no path is given
    playlist_file: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Longest simulated playback, in seconds
    play_demo_limit: int = PLAY_DEMO_LIMIT_DEFAULT

    # Session behaviour
    autoload: bool = True
    autosave_on_quit: bool = True

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and clamp numeric settings.

        Only fields flagged with ``metadata={"path": True}`` are converted.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if isinstance(self.play_demo_limit, bool) or not isinstance(self.play_demo_limit, int):
            self.play_demo_limit = PLAY_DEMO_LIMIT_DEFAULT
        elif self.play_demo_limit < 0:
            self.play_demo_limit = 0

    @property
    def resolved_playlist_file(self) -> Path:
        """Return the playlist path to use when commands omit one."""

        return self.playlist_file or Path(DEFAULT_PLAYLIST_FILE)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# tracklist Configuration File")
        lines.append("")

        lines.append("# Playlist file used by save, load and quit (optional)")
        lines.append("# Relative paths resolve against the working directory")
        lines.append('# Example: playlist_file = "/path/to/playlist.csv"')
        if config["playlist_file"] is not None:
            lines.append(f"playlist_file = {self._format_toml_value(config['playlist_file'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tracklist.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Longest simulated playback for the play command, in seconds")
        lines.append(
            f"play_demo_limit = {self._format_toml_value(config['play_demo_limit'])}"
        )
        lines.append("")

        lines.append("# Load the playlist file on start and save it on quit")
        lines.append(f"autoload = {self._format_toml_value(config['autoload'])}")
        lines.append(
            f"autosave_on_quit = {self._format_toml_value(config['autosave_on_quit'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(key for key in config_dict if key not in known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config"]
