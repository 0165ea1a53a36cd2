"""Top-down decision diagram construction from specs, with vtree and averaging tools."""

__version__ = "0.1.0"

__all__ = [
    "average",
    "builder",
    "datatable",
    "dumper",
    "hashing",
    "intsubset",
    "network",
    "size_constraint",
    "subsetter",
    "unreduction",
    "vtree",
]