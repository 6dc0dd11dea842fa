"""BBDO category/element taxonomy."""

from snow_connector.taxonomy.mapping import (
    ELEMENT_TABLES,
    BamElement,
    Category,
    NebElement,
    StorageElement,
    category_accepted,
    category_id,
    category_name,
    element_accepted,
    element_id,
    element_name,
)

__all__ = [
    "ELEMENT_TABLES",
    "BamElement",
    "Category",
    "NebElement",
    "StorageElement",
    "category_accepted",
    "category_id",
    "category_name",
    "element_accepted",
    "element_id",
    "element_name",
]
