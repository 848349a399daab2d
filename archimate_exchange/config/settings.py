"""
Export Options for the Exchange XML Exporter

This module provides the options recognised by the exporter. Defaults can be
overridden through environment variables or a YAML file, so batch exports can
be tuned without code changes.

Usage:
    from archimate_exchange.config.settings import ExportOptions

    options = ExportOptions(language_code="en", metadata={"creator": "EA Team"})
    options = ExportOptions.from_env()
    options = ExportOptions.from_yaml(Path("export.yaml"))

Environment Variables:
    ARCHIMATE_SAVE_ORGANIZATION=true/false - Write the <organization> section
    ARCHIMATE_INCLUDE_XSD=true/false       - Copy XSD files next to the output
    ARCHIMATE_LANGUAGE_CODE=en             - xml:lang for every text node
    ARCHIMATE_SCHEMA_DIR=/path/to/xsd      - Where the XSD files are copied from

YAML Format:
    save_organization: true
    include_auxiliary_files: false
    language_code: en
    metadata:
      title: Enterprise Model
      creator: EA Team
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from archimate_exchange.errors import ConfigurationError

# XSD files are not bundled; callers point schema_dir at their own copies
DEFAULT_SCHEMA_DIR = Path(__file__).parent.parent / "schemas"

# Auxiliary schema files copied next to the output
ARCHIMATE_XSD = "archimate_v2p1.xsd"
DUBLINCORE_XSD = "dc.xsd"

# Metadata field names become dc:<name> elements; empty names are skipped on export
_FIELD_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9._-]*$")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: '{raw}'. "
        f"Use one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}"
    )


class ExportOptions(BaseModel):
    """Per-export configuration.

    Attributes:
        save_organization: Write the folder tree as an <organization> section
        include_auxiliary_files: Copy the XSD files next to the output file
        language_code: Optional xml:lang value applied to every text node
        metadata: Dublin Core field name -> value, in output order
        schema_dir: Directory holding archimate_v2p1.xsd and dc.xsd
    """

    model_config = ConfigDict(frozen=True)

    save_organization: bool = Field(
        False,
        description="Write the folder tree as an <organization> section"
    )
    include_auxiliary_files: bool = Field(
        False,
        description="Copy the XSD schema files next to the exported document"
    )
    language_code: Optional[str] = Field(
        None,
        description="xml:lang code attached to every text node (e.g. 'en')"
    )
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Dublin Core metadata field -> value"
    )
    schema_dir: Path = Field(
        DEFAULT_SCHEMA_DIR,
        description="Directory the auxiliary XSD files are copied from"
    )

    @field_validator("language_code")
    @classmethod
    def normalize_language_code(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or blank code as no code."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("metadata", mode="before")
    @classmethod
    def normalize_metadata(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, Mapping):
            invalid = [str(key) for key in v if key and not _FIELD_NAME.match(str(key))]
            if invalid:
                raise ConfigurationError(
                    f"Invalid metadata field name(s): {', '.join(repr(k) for k in invalid)}. "
                    f"Use plain Dublin Core names such as 'title' or 'creator'"
                )
            return {str(key): "" if value is None else str(value) for key, value in v.items()}
        return v

    @model_validator(mode="after")
    def check_schema_files(self) -> "ExportOptions":
        """Fail before any output is written if the XSD files cannot be copied."""
        if self.include_auxiliary_files:
            missing = [
                name for name in self.schema_files()
                if not (Path(self.schema_dir) / name).is_file()
            ]
            if missing:
                raise ConfigurationError(
                    f"XSD schema file(s) {', '.join(missing)} not found in {self.schema_dir}. "
                    f"Set schema_dir (or ARCHIMATE_SCHEMA_DIR) to a directory containing them."
                )
        return self

    def has_metadata(self) -> bool:
        """True if at least one metadata value is non-empty."""
        return any(value for value in self.metadata.values())

    def schema_files(self) -> List[str]:
        """XSD files copied with include_auxiliary_files: dc.xsd only with metadata."""
        names = [ARCHIMATE_XSD]
        if self.has_metadata():
            names.append(DUBLINCORE_XSD)
        return names

    def with_overrides(self, **overrides: Any) -> "ExportOptions":
        """Return a validated copy with the given fields replaced.

        Raises:
            ConfigurationError: If an override is invalid
        """
        data = self.model_dump()
        data.update(overrides)
        return _build(data, source="overrides")

    @classmethod
    def from_env(cls, **overrides: Any) -> "ExportOptions":
        """Build options from ARCHIMATE_* environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        data: Dict[str, Any] = {
            "save_organization": _env_flag("ARCHIMATE_SAVE_ORGANIZATION", False),
            "include_auxiliary_files": _env_flag("ARCHIMATE_INCLUDE_XSD", False),
            "language_code": os.getenv("ARCHIMATE_LANGUAGE_CODE"),
        }
        schema_dir = os.getenv("ARCHIMATE_SCHEMA_DIR")
        if schema_dir:
            data["schema_dir"] = Path(schema_dir)
        data.update(overrides)
        return _build(data, source="environment")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ExportOptions":
        """Load options from a YAML mapping.

        Raises:
            ConfigurationError: If file not found, invalid YAML or invalid values
        """
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Options file not found: {yaml_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in options file: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Options file must contain a mapping, got {type(data).__name__}"
            )
        return _build(data, source=str(yaml_path))


def _build(data: Dict[str, Any], source: str) -> ExportOptions:
    try:
        return ExportOptions(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid export options from {source}: {e}")
