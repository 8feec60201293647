"""Configuration management for elm reactor.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "reactor.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "localhost"
    port: int = 8000


@dataclass
class ProjectConfig:
    """Served project configuration."""

    root: Path = field(default_factory=lambda: Path("."))


@dataclass
class CompilerConfig:
    """Elm compiler configuration."""

    executable: str = "elm"


@dataclass
class LiveReloadConfig:
    """Live reload configuration."""

    enabled: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    project: ProjectConfig
    compiler: CompilerConfig
    live_reload: LiveReloadConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for reactor.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            project=ProjectConfig(),
            compiler=CompilerConfig(),
            live_reload=LiveReloadConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            project=cls._parse_project(data.get("project"), config_dir),
            compiler=cls._parse_compiler(data.get("compiler")),
            live_reload=cls._parse_live_reload(data.get("live_reload")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "localhost")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8000)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")
        if not 0 <= port <= 65535:
            raise ValueError("server.port must be between 0 and 65535")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_project(cls, data: object, config_dir: Path) -> ProjectConfig:
        """Parse project configuration section.

        Args:
            data: Raw project section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ProjectConfig instance
        """
        if data is None:
            return ProjectConfig(root=config_dir)

        if not isinstance(data, dict):
            raise ValueError("project section must be a dictionary")

        root = data.get("root", ".")
        if not isinstance(root, str):
            raise ValueError("project.root must be a string")

        return ProjectConfig(root=config_dir / root)

    @classmethod
    def _parse_compiler(cls, data: object) -> CompilerConfig:
        if data is None:
            return CompilerConfig()

        if not isinstance(data, dict):
            raise ValueError("compiler section must be a dictionary")

        executable = data.get("executable", "elm")
        if not isinstance(executable, str) or not executable:
            raise ValueError("compiler.executable must be a non-empty string")

        return CompilerConfig(executable=executable)

    @classmethod
    def _parse_live_reload(cls, data: object) -> LiveReloadConfig:
        if data is None:
            return LiveReloadConfig()

        if not isinstance(data, dict):
            raise ValueError("live_reload section must be a dictionary")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError("live_reload.enabled must be a boolean")

        return LiveReloadConfig(enabled=enabled)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        root: Path | None = None,
        executable: str | None = None,
        live_reload_enabled: bool | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            root: Override project.root
            executable: Override compiler.executable
            live_reload_enabled: Override live_reload.enabled

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        project = self.project
        if root is not None:
            project = replace(self.project, root=root)

        compiler = self.compiler
        if executable is not None:
            compiler = replace(self.compiler, executable=executable)

        live_reload = self.live_reload
        if live_reload_enabled is not None:
            live_reload = replace(self.live_reload, enabled=live_reload_enabled)

        return replace(
            self,
            server=server,
            project=project,
            compiler=compiler,
            live_reload=live_reload,
        )
