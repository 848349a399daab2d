"""Exporters for converting ArchiMate models to the Open Group exchange format.

Available Exporters:
    - XMLModelExporter: Export to ArchiMate model exchange XML (2.1 namespace)
"""

from archimate_exchange.exporters.attribute_utils import create_id, to_exchange_id
from archimate_exchange.exporters.property_definitions import PropertyDefinitionRegistry
from archimate_exchange.exporters.xml_model_exporter import (
    ExportStats,
    ModelDocumentWriter,
    XMLModelExporter,
    collect_folder_contents,
    export_to_exchange_xml,
)

__all__ = [
    "create_id",
    "to_exchange_id",
    "PropertyDefinitionRegistry",
    "ExportStats",
    "ModelDocumentWriter",
    "XMLModelExporter",
    "collect_folder_contents",
    "export_to_exchange_xml",
]
