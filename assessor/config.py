"""
Assessment Configuration

Settings live in an optional `assessor.yaml` at the project root:

    framework: auto
    include_patterns: ["**/*.{js,jsx,ts,tsx,vue}"]
    exclude_patterns: ["**/node_modules/**"]
    target_level: middle
    language: en
    output:
      format: console
      path: null
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from assessor.i18n import SUPPORTED_LANGUAGES, default_language
from assessor.models import FRAMEWORKS, LEVELS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "assessor.yaml"

DEFAULT_INCLUDE = ["**/*.{js,jsx,ts,tsx,vue}"]
DEFAULT_EXCLUDE = [
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/*.test.*",
    "**/*.spec.*",
]

FRAMEWORK_CHOICES = ("auto",) + FRAMEWORKS
OUTPUT_FORMATS = ("console", "json", "html", "all")
LANGUAGES = tuple(SUPPORTED_LANGUAGES)


class ConfigError(ValueError):
    """Configuration that makes an assessment impossible."""


@dataclass
class AssessmentConfig:
    """Everything needed to run one assessment"""
    project_path: Path
    framework: str = "auto"
    include_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    target_level: Optional[str] = None
    language: str = "en"
    output_format: str = "console"
    output_path: Optional[str] = None

    def validate(self) -> "AssessmentConfig":
        """Raise ConfigError before any analysis starts."""
        root = Path(self.project_path)
        if not root.exists():
            raise ConfigError(f"Project not found: {root}")
        if not root.is_dir():
            raise ConfigError(f"Project path is not a directory: {root}")
        if self.framework not in FRAMEWORK_CHOICES:
            raise ConfigError(f"Unknown framework: {self.framework} "
                              f"(expected one of {', '.join(FRAMEWORK_CHOICES)})")
        if self.target_level is not None and self.target_level not in LEVELS:
            raise ConfigError(f"Unknown level: {self.target_level}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"Unknown output format: {self.output_format}")
        if self.language not in LANGUAGES:
            raise ConfigError(f"Unsupported language: {self.language}")
        if not self.include_patterns:
            raise ConfigError("At least one include pattern is required")
        return self

    def to_dict(self) -> dict:
        """The YAML form written by `init`"""
        return {
            "framework": self.framework,
            "include_patterns": list(self.include_patterns),
            "exclude_patterns": list(self.exclude_patterns),
            "target_level": self.target_level,
            "language": self.language,
            "output": {
                "format": self.output_format,
                "path": self.output_path,
            },
        }


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(
    project_path: str,
    config_file: Optional[str] = None,
    **overrides,
) -> AssessmentConfig:
    """
    Load configuration for a project.

    Args:
        project_path: Root of the project to assess
        config_file: Explicit YAML file (defaults to <project>/assessor.yaml if present)
        **overrides: Values from the command line; None means "not given"

    Returns:
        Validated AssessmentConfig
    """
    root = Path(project_path).resolve()
    data: dict = {}

    if config_file:
        path = Path(config_file)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_yaml(path)
    elif (root / CONFIG_FILENAME).exists():
        data = _read_yaml(root / CONFIG_FILENAME)

    if data:
        logger.info("Loaded configuration: %s", sorted(data))

    output = data.get("output") or {}
    config = AssessmentConfig(
        project_path=root,
        framework=data.get("framework", "auto"),
        include_patterns=list(data.get("include_patterns") or DEFAULT_INCLUDE),
        exclude_patterns=list(data.get("exclude_patterns", DEFAULT_EXCLUDE) or []),
        target_level=data.get("target_level"),
        language=data["language"] if "language" in data else default_language(),
        output_format=output.get("format", "console"),
        output_path=output.get("path"),
    )

    for key, value in overrides.items():
        if value is None:
            continue
        if not hasattr(config, key):
            raise ConfigError(f"Unknown setting: {key}")
        setattr(config, key, value)

    return config.validate()


def write_default_config(directory: str = ".", framework: str = "auto") -> Path:
    """Create assessor.yaml with default settings"""
    if framework not in FRAMEWORK_CHOICES:
        raise ConfigError(f"Unknown framework: {framework}")

    config = AssessmentConfig(project_path=Path(directory), framework=framework,
                              target_level="middle")
    path = Path(directory) / CONFIG_FILENAME
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    return path
