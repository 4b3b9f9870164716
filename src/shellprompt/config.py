"""Configuration models and loading"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/shellprompt.yaml"


class LuaConfig(BaseModel):
    """Settings for the lua module"""
    format: str = "via [$symbol(v$version )]($style)"
    symbol: str = "🌙 "
    style: str = "bold blue"
    lua_binary: str = "lua"
    disabled: bool = False


class CrystalConfig(BaseModel):
    """Settings for the crystal module"""
    format: str = "via [$symbol(v$version )]($style)"
    symbol: str = "🔮 "
    style: str = "bold red"
    disabled: bool = False


class ShellConfig(BaseModel):
    """Settings for the shell module"""
    format: str = "$indicator "
    bash_indicator: str = "bsh"
    fish_indicator: str = "fsh"
    zsh_indicator: str = "zsh"
    powershell_indicator: str = "psh"
    ion_indicator: str = "ion"
    elvish_indicator: str = "esh"
    tcsh_indicator: str = "tsh"
    unknown_indicator: str = ""
    disabled: bool = True


class PromptConfig(BaseModel):
    """Top-level configuration"""
    modules: List[str] = Field(default_factory=lambda: ["shell", "crystal", "lua"])
    command_timeout: float = Field(default=0.5, gt=0, description="Seconds to wait for a version command")
    lua: LuaConfig = Field(default_factory=LuaConfig)
    crystal: CrystalConfig = Field(default_factory=CrystalConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)


def config_path() -> Path:
    """Location of the configuration file"""
    return Path(os.path.expanduser(os.getenv("SHELLPROMPT_CONFIG", DEFAULT_CONFIG_PATH)))


def load_config(path: Optional[str] = None) -> PromptConfig:
    """
    Load configuration from YAML

    A missing file gives the defaults. An unreadable or invalid file is
    logged and also gives the defaults, so a broken config never stops
    the prompt from rendering.
    """
    file_path = Path(os.path.expanduser(path)) if path else config_path()
    if not file_path.exists():
        return PromptConfig()

    try:
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Error loading config from %s: %s", file_path, e)
        return PromptConfig()

    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a mapping", file_path)
        return PromptConfig()

    try:
        return PromptConfig(**data)
    except ValidationError as e:
        logger.warning("Invalid config in %s:\n%s", file_path, e)
        return PromptConfig()
