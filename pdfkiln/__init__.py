"""Building blocks for writing PDF documents: geometry, versions, page sizes, text, resources,
cross-reference tables, trees, soft masks, patterns and shadings."""

__version__ = "0.1.0"

__all__ = [
    "page_size",
    "pattern",
    "resource_category",
    "resources",
    "shading",
    "soft_mask",
    "text",
    "tree",
    "util",
    "version",
    "xref",
]