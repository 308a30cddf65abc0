"""
Configuration for the file handling utility.

Settings are read from a YAML file with a top-level ``filehandling`` section.
Anything missing falls back to the defaults below.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional
import yaml


SECTION = "filehandling"

LINE_TERMINATORS = {
    "os": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
}

TRUE_STRINGS = {"true", "yes", "on", "1"}
FALSE_STRINGS = {"false", "no", "off", "0"}


def _as_bool(value: Any, default: bool) -> bool:
    """Interpret a YAML value as a boolean; unrecognised values give default."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return default


def _default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return {
        "encoding": "utf-8",
        "line_terminator": "os",
        "audit_enabled": True,
        "audit_log": "data/audit_log.jsonl",
        "demo_directory": "myTestDirectory",
    }


@dataclass
class Settings:
    """Runtime settings for file operations, the audit log and the demo."""
    encoding: str = "utf-8"
    line_terminator: str = "os"
    audit_enabled: bool = True
    audit_log: str = "data/audit_log.jsonl"
    demo_directory: str = "myTestDirectory"

    @property
    def terminator(self) -> str:
        """The literal string appended after content by append operations."""
        return LINE_TERMINATORS.get(self.line_terminator.lower(), self.line_terminator)

    @classmethod
    def load(cls, config_path: Optional[str] = "config.yaml") -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Settings populated from the file, or defaults if the file is
            missing or unreadable
        """
        config = _default_config()

        if config_path is None or not Path(config_path).exists():
            return cls(**config)

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return cls(**config)

        if not isinstance(loaded, dict):
            return cls(**config)

        section = loaded.get(SECTION, loaded)
        if isinstance(section, dict):
            for key in config:
                if section.get(key) is not None:
                    config[key] = section[key]

        config["encoding"] = str(config["encoding"])
        config["line_terminator"] = str(config["line_terminator"])
        config["audit_enabled"] = _as_bool(config["audit_enabled"], default=True)
        config["audit_log"] = str(config["audit_log"])
        config["demo_directory"] = str(config["demo_directory"])
        return cls(**config)

    def save(self, config_path: str = "config.yaml") -> None:
        """Save current settings, keeping any other sections already in the file."""
        config: Dict[str, Any] = {SECTION: asdict(self)}

        path = Path(config_path)
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    existing = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError):
                existing = {}
            if isinstance(existing, dict) and existing:
                existing[SECTION] = config[SECTION]
                config = existing

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False)
