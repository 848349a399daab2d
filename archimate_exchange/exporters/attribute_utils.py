"""Shared utilities for identifier mapping and text filtering.

Kept apart from XMLModelExporter so the property-definition registry and the
writers use the same rules.
"""

from typing import Any, Optional

ID_PREFIX = "id-"


def to_exchange_id(identifier: str) -> str:
    """
    Map an intrinsic model identifier to its exchange identifier.

    Examples:
        >>> to_exchange_id("3f2a")
        'id-3f2a'

    Args:
        identifier: Identifier stored on the model object

    Returns:
        Identifier written to identifier/identifierref/source/target attributes
    """
    return f"{ID_PREFIX}{identifier}"


def create_id(obj: Any) -> str:
    """
    Return the exchange identifier of an identifiable object.

    Relationship endpoints go through to_exchange_id() with the stored
    source/target identifiers, so they match the identifier written for the
    element itself.

    Examples:
        >>> class Obj: id = "abc"
        >>> create_id(Obj())
        'id-abc'
    """
    return to_exchange_id(obj.id)


def has_some_text(text: Optional[str]) -> bool:
    """
    Check if a text value should produce an XML node.

    Examples:
        >>> has_some_text("Customer")
        True
        >>> has_some_text("")
        False
        >>> has_some_text(None)
        False
        >>> has_some_text(" ")
        True
    """
    return text is not None and text != ""
