"""Linked list, chained hash map and their cursors, datum type tags, RTTI helpers and factory registries."""

__version__ = "0.1.0"

__all__ = [
    "datum_types",
    "defaults",
    "factory",
    "hashmap",
    "hashmap_cursor",
    "rtti",
    "slist",
    "slist_node",
]