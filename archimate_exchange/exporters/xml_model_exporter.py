"""Exchange XML Exporter for ArchiMate Models.

This module exports an ArchimateModel to the Open Group ArchiMate model
exchange format (2.1 namespace), optionally with Dublin Core metadata, an
organization tree and xml:lang attributes on every text node.

Architecture:
    - PropertyDefinitionRegistry: property key -> propid-N, built once per export
    - ModelDocumentWriter: per-export state and one writer per node kind
    - XMLModelExporter: builds the document, writes it, copies XSD files

Document layout (children of <model>, in order):
    metadata? name? documentation? properties? elements relationships
    organization? propertyDefinitions? views?
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from lxml import etree

from archimate_exchange.config.settings import ExportOptions
from archimate_exchange.exporters import constants as c
from archimate_exchange.exporters.attribute_utils import (
    create_id,
    has_some_text,
    to_exchange_id,
)
from archimate_exchange.exporters.property_definitions import PropertyDefinitionRegistry
from archimate_exchange.exporters.type_mapper import get_component_name, get_viewpoint_name
from archimate_exchange.models.archimate import (
    ArchimateDiagramModel,
    ArchimateElement,
    ArchimateModel,
    ArchimateRelationship,
    Folder,
    FolderType,
    ModelObject,
)

logger = logging.getLogger(__name__)

# Top-level folders walked for the <elements> section, in output order
ELEMENT_FOLDER_TYPES = (
    FolderType.BUSINESS,
    FolderType.APPLICATION,
    FolderType.TECHNOLOGY,
    FolderType.MOTIVATION,
    FolderType.IMPLEMENTATION_MIGRATION,
    FolderType.CONNECTORS,
)


def _qname(name: str) -> str:
    return f"{{{c.ARCHIMATE_NAMESPACE}}}{name}"


def collect_folder_contents(folder: Folder) -> List[ModelObject]:
    """Return all objects of a folder tree in pre-order.

    Objects stored directly in a folder come first, in stored order, then each
    sub-folder is collected fully before its next sibling.
    """
    objects: List[ModelObject] = list(folder.elements)
    for sub_folder in folder.folders:
        objects.extend(collect_folder_contents(sub_folder))
    return objects


@dataclass
class ExportStats:
    """Counts of nodes written during one export."""
    elements: int = 0
    relationships: int = 0
    views: int = 0
    property_definitions: int = 0
    skipped_properties: int = 0


class ModelDocumentWriter:
    """Writes one model into one exchange document.

    Holds all state of a single export (options, property registry, counts),
    so a new writer is created for every document.
    """

    def __init__(
        self,
        model: ArchimateModel,
        options: ExportOptions,
        registry: Optional[PropertyDefinitionRegistry] = None,
    ):
        self.model = model
        self.options = options
        self.registry = (
            registry if registry is not None else PropertyDefinitionRegistry.from_model(model)
        )
        self.language_code = options.language_code
        self.stats = ExportStats()

    # ========================================= Document ======================================

    def build(self) -> etree._Element:
        """Build and return the <model> root element."""
        root = self.create_root_element()
        root.set(c.ATTRIBUTE_IDENTIFIER, create_id(self.model))

        self.write_metadata(root)

        if has_some_text(self.model.name):
            self._write_text_node(root, c.ELEMENT_NAME, self.model.name)

        # Purpose is written as the model's documentation
        if has_some_text(self.model.purpose):
            self._write_text_node(root, c.ELEMENT_DOCUMENTATION, self.model.purpose)

        self.write_properties(self.model, root)
        self.write_model_elements(root)
        self.write_model_relationships(root)

        if self.options.save_organization:
            self.write_organization(root)

        # Registry was filled by the full-model scan, so this covers every
        # property written above and below
        self.write_property_definitions(root)
        self.write_views(root)
        return root

    def create_root_element(self) -> etree._Element:
        """Create the root <model> element with namespaces and schemaLocation.

        The Dublin Core namespace and schema location are added only when
        metadata is present.
        """
        with_metadata = self.options.has_metadata()

        nsmap = {
            None: c.ARCHIMATE_NAMESPACE,
            c.XSI_PREFIX: c.XSI_NAMESPACE,
        }
        if with_metadata:
            nsmap[c.DC_PREFIX] = c.DC_NAMESPACE

        root = etree.Element(_qname(c.ELEMENT_MODEL), nsmap=nsmap)

        schema_location = f"{c.ARCHIMATE_NAMESPACE} {c.ARCHIMATE_SCHEMA_LOCATION}"
        if with_metadata:
            schema_location += f" {c.DC_NAMESPACE} {c.DC_SCHEMA_LOCATION}"
        root.set(c.ATTRIBUTE_SCHEMA_LOCATION, schema_location)

        return root

    # ========================================= Metadata ======================================

    def write_metadata(self, parent: etree._Element) -> Optional[etree._Element]:
        """Write the Dublin Core <metadata> block if any value is set."""
        if not self.options.has_metadata():
            return None

        metadata_elem = etree.SubElement(parent, _qname(c.ELEMENT_METADATA))

        schema_elem = etree.SubElement(metadata_elem, _qname(c.ELEMENT_SCHEMA))
        schema_elem.text = c.METADATA_SCHEMA

        version_elem = etree.SubElement(metadata_elem, _qname(c.ELEMENT_SCHEMAVERSION))
        version_elem.text = c.METADATA_SCHEMA_VERSION

        for field_name, value in self.options.metadata.items():
            if has_some_text(field_name) and has_some_text(value):
                dc_elem = etree.SubElement(metadata_elem, f"{{{c.DC_NAMESPACE}}}{field_name}")
                self._write_text(dc_elem, value)

        return metadata_elem

    # ========================================= Elements ======================================

    def write_model_elements(self, parent: etree._Element) -> etree._Element:
        """Write the <elements> section. Always present, possibly empty."""
        elements_elem = etree.SubElement(parent, _qname(c.ELEMENT_ELEMENTS))
        for folder_type in ELEMENT_FOLDER_TYPES:
            folder = self.model.get_folder(folder_type)
            if folder is None:
                continue
            for obj in collect_folder_contents(folder):
                if isinstance(obj, ArchimateElement):
                    self.write_element(obj, elements_elem)
        return elements_elem

    def write_element(
        self, element: ArchimateElement, parent: etree._Element
    ) -> etree._Element:
        """Write one <element> node.

        Exports:
            - identifier, xsi:type attributes
            - Optional: <label>, <documentation>, <properties>
        """
        element_elem = etree.SubElement(parent, _qname(c.ELEMENT_ELEMENT))
        element_elem.set(c.ATTRIBUTE_IDENTIFIER, create_id(element))
        element_elem.set(c.ATTRIBUTE_TYPE, get_component_name(element))

        self._write_label_and_documentation(element_elem, element)
        self.write_properties(element, element_elem)

        self.stats.elements += 1
        return element_elem

    # ========================================= Relationships ======================================

    def write_model_relationships(self, parent: etree._Element) -> etree._Element:
        """Write the <relationships> section. Always present, possibly empty."""
        relationships_elem = etree.SubElement(parent, _qname(c.ELEMENT_RELATIONSHIPS))
        folder = self.model.get_folder(FolderType.RELATIONS)
        if folder is not None:
            for obj in collect_folder_contents(folder):
                if isinstance(obj, ArchimateRelationship):
                    self.write_relationship(obj, relationships_elem)
        return relationships_elem

    def write_relationship(
        self, relationship: ArchimateRelationship, parent: etree._Element
    ) -> etree._Element:
        """Write one <relationship> node.

        Source and target are mapped from the stored endpoint identifiers;
        they are assumed to resolve to elements of the same model.
        """
        relationship_elem = etree.SubElement(parent, _qname(c.ELEMENT_RELATIONSHIP))
        relationship_elem.set(c.ATTRIBUTE_IDENTIFIER, create_id(relationship))
        relationship_elem.set(c.ATTRIBUTE_SOURCE, to_exchange_id(relationship.source_id))
        relationship_elem.set(c.ATTRIBUTE_TARGET, to_exchange_id(relationship.target_id))
        relationship_elem.set(c.ATTRIBUTE_TYPE, get_component_name(relationship))

        self._write_label_and_documentation(relationship_elem, relationship)
        self.write_properties(relationship, relationship_elem)

        self.stats.relationships += 1
        return relationship_elem

    # ========================================= Organization ======================================

    def write_organization(self, parent: etree._Element) -> etree._Element:
        """Write the <organization> section mirroring the folder tree."""
        organization_elem = etree.SubElement(parent, _qname(c.ELEMENT_ORGANIZATION))
        for folder in self.model.folders:
            self.write_folder(folder, organization_elem)
        return organization_elem

    def write_folder(
        self, folder: Folder, parent: etree._Element
    ) -> Optional[etree._Element]:
        """Write a folder as an <item> with references to its contents.

        Returns:
            The <item> node, or None for a folder with no sub-folders and no
            objects (nothing is written)
        """
        if folder.is_empty():
            return None

        item_elem = etree.SubElement(parent, _qname(c.ELEMENT_ITEM))

        # Label is required on folder items even when the name is empty
        label_elem = etree.SubElement(item_elem, _qname(c.ELEMENT_LABEL))
        self._write_text(label_elem, folder.name)

        if has_some_text(folder.documentation):
            self._write_text_node(item_elem, c.ELEMENT_DOCUMENTATION, folder.documentation)

        for sub_folder in folder.folders:
            self.write_folder(sub_folder, item_elem)

        for obj in folder.elements:
            ref_elem = etree.SubElement(item_elem, _qname(c.ELEMENT_ITEM))
            ref_elem.set(c.ATTRIBUTE_IDENTIFIERREF, create_id(obj))

        return item_elem

    # ========================================= Properties ======================================

    def write_property_definitions(
        self, parent: etree._Element
    ) -> Optional[etree._Element]:
        """Write <propertyDefinitions> in key order, or nothing if the registry is empty."""
        if not self.registry:
            return None

        definitions_elem = etree.SubElement(parent, _qname(c.ELEMENT_PROPERTYDEFS))
        for key, ref_id in self.registry.items():
            definition_elem = etree.SubElement(definitions_elem, _qname(c.ELEMENT_PROPERTYDEF))
            definition_elem.set(c.ATTRIBUTE_IDENTIFIER, ref_id)
            definition_elem.set(c.ATTRIBUTE_NAME, key)
            definition_elem.set(c.ATTRIBUTE_PROPERTY_TYPE, c.PROPERTY_TYPE_STRING)

        self.stats.property_definitions = len(self.registry)
        return definitions_elem

    def write_properties(
        self, owner: Any, parent: etree._Element
    ) -> Optional[etree._Element]:
        """Write the <properties> node of a model object.

        A property is written when its key and value are non-empty and its key
        has a definition. Nothing is written when no property qualifies.

        Returns:
            The <properties> node, or None
        """
        properties = getattr(owner, "properties", None)
        if not properties:
            return None

        writable = []
        for prop in properties:
            if not (has_some_text(prop.key) and has_some_text(prop.value)):
                continue
            ref_id = self.registry.get(prop.key)
            if ref_id is None:
                self.stats.skipped_properties += 1
                logger.debug(f"No property definition for key '{prop.key}', skipping")
                continue
            writable.append((ref_id, prop.value))

        if not writable:
            return None

        properties_elem = etree.SubElement(parent, _qname(c.ELEMENT_PROPERTIES))
        for ref_id, value in writable:
            property_elem = etree.SubElement(properties_elem, _qname(c.ELEMENT_PROPERTY))
            property_elem.set(c.ATTRIBUTE_IDENTIFIERREF, ref_id)
            self._write_text_node(property_elem, c.ELEMENT_VALUE, value)

        return properties_elem

    # ========================================= Views ======================================

    def write_views(self, parent: etree._Element) -> Optional[etree._Element]:
        """Write <views> for ArchiMate diagrams, or nothing if there are none."""
        views = [
            dm for dm in self.model.diagram_models()
            if isinstance(dm, ArchimateDiagramModel)
        ]
        if not views:
            return None

        views_elem = etree.SubElement(parent, _qname(c.ELEMENT_VIEWS))
        for dm in views:
            self.write_view(dm, views_elem)
        return views_elem

    def write_view(
        self, dm: ArchimateDiagramModel, parent: etree._Element
    ) -> etree._Element:
        """Write one <view> node with an optional viewpoint attribute."""
        view_elem = etree.SubElement(parent, _qname(c.ELEMENT_VIEW))
        view_elem.set(c.ATTRIBUTE_IDENTIFIER, create_id(dm))

        viewpoint_name = get_viewpoint_name(dm.viewpoint)
        if has_some_text(viewpoint_name):
            view_elem.set(c.ATTRIBUTE_VIEWPOINT, viewpoint_name)

        self._write_label_and_documentation(view_elem, dm)
        self.write_properties(dm, view_elem)

        self.stats.views += 1
        return view_elem

    # ========================================= Helpers ======================================

    def _write_label_and_documentation(
        self,
        parent: etree._Element,
        obj: Union[ArchimateElement, ArchimateRelationship, ArchimateDiagramModel],
    ) -> None:
        if has_some_text(obj.name):
            self._write_text_node(parent, c.ELEMENT_LABEL, obj.name)
        if has_some_text(obj.documentation):
            self._write_text_node(parent, c.ELEMENT_DOCUMENTATION, obj.documentation)

    def _write_text_node(
        self, parent: etree._Element, name: str, text: Optional[str]
    ) -> etree._Element:
        node = etree.SubElement(parent, _qname(name))
        self._write_text(node, text)
        return node

    def _write_text(self, node: etree._Element, text: Optional[str]) -> None:
        """Set node text and xml:lang when a language code is configured."""
        node.text = text
        if self.language_code is not None:
            node.set(c.ATTRIBUTE_LANG, self.language_code)


class XMLModelExporter:
    """Main exporter class for converting ArchiMate models to exchange XML.

    Usage:
        exporter = XMLModelExporter(ExportOptions(language_code="en"))
        exporter.export(model, Path("model.xml"))

    Architecture:
        1. Scan model properties into a fresh PropertyDefinitionRegistry
        2. Build the <model> tree with ModelDocumentWriter
        3. Write XML file
        4. Copy XSD files (optional)

    The exporter keeps no state between exports; every call gets its own
    writer and registry.
    """

    def __init__(self, options: Optional[ExportOptions] = None):
        """Initialize exporter.

        Args:
            options: Export options (defaults to ExportOptions())
        """
        self.options = options or ExportOptions()

    def build_document(self, model: ArchimateModel) -> etree._Element:
        """Build the exchange document for a model without writing it.

        Args:
            model: Model to export

        Returns:
            Root <model> element
        """
        return ModelDocumentWriter(model, self.options).build()

    def export(self, model: ArchimateModel, output_path: Path) -> ExportStats:
        """Export model to an exchange XML file.

        Args:
            model: ArchimateModel instance to export
            output_path: Path where XML file will be written

        Returns:
            Counts of written nodes

        Raises:
            OSError: If the document cannot be written or XSD files cannot be
                copied (FileNotFoundError when an XSD file is missing)
        """
        output_path = Path(output_path)

        writer = ModelDocumentWriter(model, self.options)
        root = writer.build()

        try:
            self._write_xml(root, output_path)
            if self.options.include_auxiliary_files:
                self._copy_schema_files(output_path.parent)
        except OSError as e:
            logger.error(f"Export of model '{model.id}' to {output_path} failed: {e}")
            raise

        stats = writer.stats
        logger.info(
            f"Exported model '{model.id}' to {output_path}: "
            f"{stats.elements} elements, {stats.relationships} relationships, "
            f"{stats.views} views"
        )
        return stats

    def _write_xml(self, root: etree._Element, output_path: Path) -> None:
        """Write XML element to file with proper formatting.

        Args:
            root: Root element to write
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        root_str = etree.tostring(
            root,
            encoding="UTF-8",
            xml_declaration=True,
            pretty_print=True
        )

        output_path.write_bytes(root_str)

    def _copy_schema_files(self, target_dir: Path) -> List[Path]:
        """Copy the ArchiMate XSD, and the Dublin Core XSD when metadata is set.

        Raises:
            FileNotFoundError: If a schema file is missing from schema_dir
        """
        copied: List[Path] = []
        for name in self.options.schema_files():
            source = Path(self.options.schema_dir) / name
            if not source.exists():
                raise FileNotFoundError(
                    f"XSD schema not found: {source}. "
                    f"Set ExportOptions.schema_dir to a directory containing {name}."
                )
            target = target_dir / name
            shutil.copyfile(source, target)
            logger.debug(f"Copied {source} to {target}")
            copied.append(target)
        return copied


def export_to_exchange_xml(
    model: ArchimateModel,
    output_path: Path,
    options: Optional[ExportOptions] = None,
    **overrides: Any,
) -> ExportStats:
    """Convenience function to export an ArchiMate model to exchange XML.

    Args:
        model: ArchimateModel instance to export
        output_path: Path where XML file will be written
        options: Export options (defaults to ExportOptions())
        **overrides: Option fields to replace, e.g. language_code="en"

    Example:
        >>> from archimate_exchange.models import ArchimateModel, ArchimateElement, ElementType
        >>> model = ArchimateModel.create("Enterprise")
        >>> model.add(ArchimateElement(name="Customer", type=ElementType.BUSINESS_ACTOR))
        >>> export_to_exchange_xml(model, Path("enterprise.xml"), save_organization=False)
    """
    options = options or ExportOptions()
    if overrides:
        options = options.with_overrides(**overrides)
    exporter = XMLModelExporter(options)
    return exporter.export(model, output_path)
