from .lookup import TagPolicy, check_unique_tags, find_tagged, get_tagged
from .tagged import (
    ROOT_TAG,
    Indexed,
    append_indexed_l,
    append_indexed_r,
    enumerate_tags,
    is_indexed,
    prepend_indexed_l,
    prepend_indexed_r,
    tags,
    unindexed,
)

__all__ = (
    # Carrier
    "ROOT_TAG",
    "Indexed",
    # Insertion
    "append_indexed_l",
    "append_indexed_r",
    "prepend_indexed_l",
    "prepend_indexed_r",
    # Projection
    "enumerate_tags",
    "is_indexed",
    "tags",
    "unindexed",
    # Lookup
    "TagPolicy",
    "check_unique_tags",
    "find_tagged",
    "get_tagged",
)
