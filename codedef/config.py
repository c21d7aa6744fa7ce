"""Configuration management for codedef."""

import yaml
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

CONFIG_FILE_NAME = ".codedefrc"


class CodedefConfig(BaseSettings):
    """codedef configuration settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="CODEDEF_",
        case_sensitive=False,
    )
    
    default_language: str = Field(
        default="c",
        description="Language used when neither --lang nor the file extension selects one"
    )
    
    show_type: bool = Field(
        default=False,
        description="Print the kind and start line of the definition before its source"
    )
    
    line_numbers: bool = Field(
        default=True,
        description="Prefix printed source lines with their line number"
    )
    
    verbose: bool = Field(
        default=False,
        description="Enable verbose output"
    )


def get_config_file_path(directory: Path) -> Path:
    """Get the path to the config file in the given directory."""
    return directory / CONFIG_FILE_NAME


def _read_yaml(config_file: Path) -> dict:
    with open(config_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    return data


def load_config(config_path: Optional[Path] = None, directory: Optional[Path] = None) -> CodedefConfig:
    """Load configuration from a YAML file, with environment variables on top."""
    config_file = None
    if config_path:
        config_file = Path(config_path)
    elif directory:
        config_file = get_config_file_path(directory)
    
    if not (config_file and config_file.exists()):
        default_config = Path.home() / CONFIG_FILE_NAME
        config_file = default_config if default_config.exists() else None
    
    if config_file is None:
        return CodedefConfig()
    
    file_values = _read_yaml(config_file)
    # Environment variables win over file values
    env_values = CodedefConfig().model_dump(exclude_unset=True)
    return CodedefConfig(**{**file_values, **env_values})


def save_config(config: CodedefConfig, directory: Path) -> Path:
    """Save configuration to file in the given directory."""
    config_file = get_config_file_path(directory)
    
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False)
    return config_file
