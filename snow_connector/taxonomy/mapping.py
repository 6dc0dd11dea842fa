"""Broker category and element tables with name/id lookups.

The tables mirror the BBDO event taxonomy.  They are closed: an id that
is not listed here is not an error, it simply never passes acceptance.
"""

from __future__ import annotations

from collections.abc import Collection
from enum import IntEnum


class Category(IntEnum):
    """Top-level BBDO event category."""

    NEB = 1
    BBDO = 2
    STORAGE = 3
    CORRELATION = 4
    DUMPER = 5
    BAM = 6
    EXTCMD = 7


class NebElement(IntEnum):
    """Elements of the ``neb`` category (monitoring engine events)."""

    ACKNOWLEDGEMENT = 1
    COMMENT = 2
    CUSTOM_VARIABLE = 3
    CUSTOM_VARIABLE_STATUS = 4
    DOWNTIME = 5
    EVENT_HANDLER = 6
    FLAPPING_STATUS = 7
    HOST_CHECK = 8
    HOST_DEPENDENCY = 9
    HOST_GROUP = 10
    HOST_GROUP_MEMBER = 11
    HOST = 12
    HOST_PARENT = 13
    HOST_STATUS = 14
    INSTANCE = 15
    INSTANCE_STATUS = 16
    LOG_ENTRY = 17
    MODULE = 18
    SERVICE_CHECK = 19
    SERVICE_DEPENDENCY = 20
    SERVICE_GROUP = 21
    SERVICE_GROUP_MEMBER = 22
    SERVICE = 23
    SERVICE_STATUS = 24
    INSTANCE_CONFIGURATION = 25


class StorageElement(IntEnum):
    """Elements of the ``storage`` category (perfdata / metrics)."""

    METRIC = 1
    REBUILD = 2
    REMOVE_GRAPH = 3
    STATUS = 4
    INDEX_MAPPING = 5
    METRIC_MAPPING = 6


class BamElement(IntEnum):
    """Elements of the ``bam`` category (business activity monitoring)."""

    BA_STATUS = 1
    KPI_STATUS = 2
    META_SERVICE_STATUS = 3
    BA_EVENT = 4
    KPI_EVENT = 5
    BA_DURATION_EVENT = 6
    DIMENSION_BA_EVENT = 7
    DIMENSION_KPI_EVENT = 8
    DIMENSION_BA_BV_RELATION_EVENT = 9
    DIMENSION_BV_EVENT = 10
    DIMENSION_TRUNCATE_TABLE_SIGNAL = 11
    BAM_REBUILD = 12
    DIMENSION_TIMEPERIOD = 13
    DIMENSION_BA_TIMEPERIOD_RELATION = 14
    DIMENSION_TIMEPERIOD_EXCEPTION = 15
    DIMENSION_TIMEPERIOD_EXCLUSION = 16
    INHERITED_DOWNTIME = 17


# Categories without an entry carry no element table.
ELEMENT_TABLES: dict[Category, type[IntEnum]] = {
    Category.NEB: NebElement,
    Category.STORAGE: StorageElement,
    Category.BAM: BamElement,
}


def _to_category(category_id: int) -> Category | None:
    try:
        return Category(category_id)
    except ValueError:
        return None


def category_id(name: str) -> int | None:
    """Return the numeric id of a category name, or None if unknown."""
    member = Category.__members__.get(name.strip().upper())
    return int(member) if member is not None else None


def category_name(category_id: int) -> str | None:
    """Inverse of :func:`category_id`."""
    category = _to_category(category_id)
    return category.name.lower() if category is not None else None


def element_id(category_id: int, name: str) -> int | None:
    """Return the id of *name* within a category, or None if unknown.

    Element ids are only meaningful together with their category id.
    """
    category = _to_category(category_id)
    if category is None:
        return None
    table = ELEMENT_TABLES.get(category)
    if table is None:
        return None
    member = table.__members__.get(name.strip().upper())
    return int(member) if member is not None else None


def element_name(category_id: int, element_id: int) -> str | None:
    """Inverse of :func:`element_id`."""
    category = _to_category(category_id)
    if category is None:
        return None
    table = ELEMENT_TABLES.get(category)
    if table is None:
        return None
    try:
        return table(element_id).name.lower()
    except ValueError:
        return None


def _names(configured: str | Collection[str]) -> set[str]:
    if isinstance(configured, str):
        configured = [configured]
    return {n.strip().lower() for n in configured if n.strip()}


def category_accepted(configured: str | Collection[str], category_id: int) -> bool:
    """True iff the category's name is one of the configured names."""
    name = category_name(category_id)
    return name is not None and name in _names(configured)


def element_accepted(
    configured: str | Collection[str],
    category_id: int,
    element_id: int,
) -> bool:
    """True iff the (category, element) pair names a configured element."""
    name = element_name(category_id, element_id)
    return name is not None and name in _names(configured)
