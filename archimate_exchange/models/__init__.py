"""In-memory ArchiMate model consumed by the exchange exporter.

The exporter only reads these objects; it never creates, mutates or deletes
them.
"""

from .archimate import (
    ArchimateDiagramModel,
    ArchimateElement,
    ArchimateModel,
    ArchimateRelationship,
    DiagramModel,
    ElementType,
    Folder,
    FolderType,
    ModelObject,
    Property,
    RelationshipType,
    SketchModel,
    Viewpoint,
    folder_type_for,
)

__all__ = [
    # Model objects
    "ArchimateModel",
    "Folder",
    "ArchimateElement",
    "ArchimateRelationship",
    "DiagramModel",
    "ArchimateDiagramModel",
    "SketchModel",
    "Property",
    "ModelObject",

    # Taxonomies
    "FolderType",
    "ElementType",
    "RelationshipType",
    "Viewpoint",
    "folder_type_for",
]
