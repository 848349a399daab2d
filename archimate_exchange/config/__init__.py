"""Export configuration."""

from archimate_exchange.config.settings import DEFAULT_SCHEMA_DIR, ExportOptions

__all__ = ["DEFAULT_SCHEMA_DIR", "ExportOptions"]
