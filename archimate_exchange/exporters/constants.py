"""Namespaces, schema locations and node names of the exchange format."""

# Namespaces
ARCHIMATE_NAMESPACE = "http://www.opengroup.org/xsd/archimate"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

DC_PREFIX = "dc"
XSI_PREFIX = "xsi"

# Schema locations
ARCHIMATE_SCHEMA_LOCATION = "http://www.opengroup.org/xsd/archimate/archimate_v2p1.xsd"
DC_SCHEMA_LOCATION = "http://dublincore.org/schemas/xmls/qdc/2008/02/11/dc.xsd"

# Metadata block
METADATA_SCHEMA = "Dublin Core"
METADATA_SCHEMA_VERSION = "1.1"

# Property definitions
PROPERTY_ID_PREFIX = "propid-"
PROPERTY_TYPE_STRING = "string"

# Nodes
ELEMENT_MODEL = "model"
ELEMENT_METADATA = "metadata"
ELEMENT_SCHEMA = "schema"
ELEMENT_SCHEMAVERSION = "schemaversion"
ELEMENT_NAME = "name"
ELEMENT_LABEL = "label"
ELEMENT_DOCUMENTATION = "documentation"
ELEMENT_PROPERTIES = "properties"
ELEMENT_PROPERTY = "property"
ELEMENT_VALUE = "value"
ELEMENT_ELEMENTS = "elements"
ELEMENT_ELEMENT = "element"
ELEMENT_RELATIONSHIPS = "relationships"
ELEMENT_RELATIONSHIP = "relationship"
ELEMENT_ORGANIZATION = "organization"
ELEMENT_ITEM = "item"
ELEMENT_PROPERTYDEFS = "propertyDefinitions"
ELEMENT_PROPERTYDEF = "propertyDefinition"
ELEMENT_VIEWS = "views"
ELEMENT_VIEW = "view"

# Attributes
ATTRIBUTE_IDENTIFIER = "identifier"
ATTRIBUTE_IDENTIFIERREF = "identifierref"
ATTRIBUTE_SOURCE = "source"
ATTRIBUTE_TARGET = "target"
ATTRIBUTE_NAME = "name"
ATTRIBUTE_VIEWPOINT = "viewpoint"
ATTRIBUTE_TYPE = f"{{{XSI_NAMESPACE}}}type"
ATTRIBUTE_SCHEMA_LOCATION = f"{{{XSI_NAMESPACE}}}schemaLocation"
ATTRIBUTE_LANG = f"{{{XML_NAMESPACE}}}lang"
# propertyDefinition/@type is unqualified
ATTRIBUTE_PROPERTY_TYPE = "type"
