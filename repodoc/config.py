"""Configuration loading for repodoc (.repodoc.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".repodoc.yml"

ENV_TOKEN_KEYS = ("REPODOC_GITHUB_TOKEN", "GITHUB_TOKEN")
ENV_BASE_URL_KEYS = ("REPODOC_GITHUB_BASE_URL",)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Connection settings for the GitHub REST API."""

    base_url: str = "https://api.github.com"
    token: Optional[str] = None
    user_agent: str = "README-Generator/1.0"
    request_timeout: float = 30.0


@dataclass
class WorkflowConfig:
    """Pacing applied by the workflow controller."""

    pacing_delay: float = 0.0


@dataclass
class RepoDocConfig:
    """Represents the settings defined in .repodoc.yml plus environment overrides."""

    github: GitHubConfig = field(default_factory=GitHubConfig)
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)
    source: Optional[Path] = None


def load_config(
    config_path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> RepoDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    env = os.environ if environ is None else environ
    config = RepoDocConfig()

    if config_path is not None:
        config_file = _resolve_config_path(config_path)
        if config_file.exists():
            data = _read_config(config_file)
            if not isinstance(data, dict):
                raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
            _apply_github(config.github, _as_dict(data.get("github")))
            _apply_workflow(config.workflow, _as_dict(data.get("workflow")))
            config.source = config_file

    token = _first_env_value(env, ENV_TOKEN_KEYS)
    if token:
        config.github.token = token
    base_url = _first_env_value(env, ENV_BASE_URL_KEYS)
    if base_url:
        config.github.base_url = base_url
    config.github.base_url = config.github.base_url.rstrip("/")

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _apply_github(target: GitHubConfig, data: Dict[str, Any]) -> None:
    base_url = _as_str(data.get("base_url"))
    if base_url:
        target.base_url = base_url
    token = _as_str(data.get("token"))
    if token:
        target.token = token
    user_agent = _as_str(data.get("user_agent"))
    if user_agent:
        target.user_agent = user_agent
    timeout = _as_float(data.get("request_timeout"))
    if timeout is not None:
        if timeout <= 0:
            raise ConfigError("github.request_timeout must be positive")
        target.request_timeout = timeout


def _apply_workflow(target: WorkflowConfig, data: Dict[str, Any]) -> None:
    delay = _as_float(data.get("pacing_delay"))
    if delay is not None:
        if delay < 0:
            raise ConfigError("workflow.pacing_delay cannot be negative")
        target.pacing_delay = delay


def _first_env_value(env: Mapping[str, str], keys: Sequence[str]) -> Optional[str]:
    for key in keys:
        value = env.get(key)
        if value:
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GitHubConfig",
    "RepoDocConfig",
    "WorkflowConfig",
    "load_config",
]
