"""
Configuration models for scriptcore.

Supports configuration via YAML file, environment variables, or programmatic setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAMES = ("scriptcore.yaml", "scriptcore.yml")


class FileSystemConfig(BaseModel):
    """Folder layout used by the physical file system."""
    
    current_directory: str | None = Field(
        default=None,
        description="Working directory (None = process working directory)"
    )
    bin_folder: str = Field(
        default="bin",
        description="Folder for referenced binaries, relative to the working directory"
    )
    dll_cache_folder: str = Field(
        default=".cache",
        description="Folder for the compiled script cache"
    )
    packages_folder: str = Field(
        default="packages",
        description="Folder holding packages and the script library bundle"
    )
    
    @field_validator("bin_folder", "dll_cache_folder", "packages_folder")
    @classmethod
    def folder_not_empty(cls, v: str) -> str:
        """Reject blank folder names."""
        if not v or not v.strip():
            raise ValueError("Folder name must not be empty")
        return v.strip()


class LibraryConfig(BaseModel):
    """Script library configuration."""
    
    file_name: str = Field(
        default="ScriptLibraries.csx",
        description="File name of the script library bundle inside the packages folder"
    )


class ExecutionConfig(BaseModel):
    """Executor wiring and environment."""
    
    references: list[str] = Field(
        default_factory=list,
        description="References added to the defaults"
    )
    namespaces: list[str] = Field(
        default_factory=list,
        description="Namespaces added to the defaults"
    )
    script_packs: list[str] = Field(
        default_factory=list,
        description="Script packs to load, as dotted import paths"
    )
    engine: str = Field(
        default="scriptcore.hosting.engine:DryRunEngine",
        description="Script engine class, as a dotted import path"
    )
    preprocessor: str = Field(
        default="scriptcore.hosting.preprocessor:PassthroughPreProcessor",
        description="Pre-processor class, as a dotted import path"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )
    file: str | None = Field(
        default=None,
        description="Log file path (None = console only)"
    )
    json_format: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )


class ScriptCoreConfig(BaseSettings):
    """
    Main scriptcore configuration.
    
    Configuration can be loaded from:
    1. YAML file (scriptcore.yaml or scriptcore.yml)
    2. Environment variables (SCRIPTCORE_* prefix)
    3. Programmatic setup
    """
    
    model_config = SettingsConfigDict(
        env_prefix="SCRIPTCORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )
    
    filesystem: FileSystemConfig = Field(default_factory=FileSystemConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    
    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "ScriptCoreConfig":
        """
        Load configuration from file and environment.
        
        Priority (highest to lowest):
        1. Specified config file, or the first default config file found
           (scriptcore.yaml, scriptcore.yml)
        2. Environment variables
        3. Default values
        
        Raises:
            FileNotFoundError: If an explicit config_path does not exist
        """
        config_data: dict = {}
        
        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise FileNotFoundError(f"Config file not found: {config_file}")
            config_data = cls._load_yaml(config_file)
        else:
            for filename in CONFIG_FILENAMES:
                config_file = Path(filename)
                if config_file.exists():
                    config_data = cls._load_yaml(config_file)
                    break
        
        return cls(**config_data)
    
    @staticmethod
    def _load_yaml(path: Path) -> dict:
        """Load YAML configuration file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if data else {}
    
    def save(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
