"""Export ArchiMate models to the Open Group model exchange XML format."""

from archimate_exchange.config.settings import ExportOptions
from archimate_exchange.errors import (
    ArchimateExchangeError,
    ConfigurationError,
    UnknownComponentTypeError,
)
from archimate_exchange.exporters.xml_model_exporter import (
    XMLModelExporter,
    export_to_exchange_xml,
)

__version__ = "0.1.0"

__all__ = [
    "ExportOptions",
    "XMLModelExporter",
    "export_to_exchange_xml",
    "ArchimateExchangeError",
    "ConfigurationError",
    "UnknownComponentTypeError",
]
