"""
Transformation Layer Schemas

Flat, one-row-per-node view of a mapped category tree.

order is a float: title prefixes may exceed the Int64 range.
parent_index is the pre-order row of the parent, since ids are only unique
among siblings.
"""

import polars as pl

MAPPED_CATEGORY_SCHEMA = pl.Schema(
    [
        ("id", pl.Int64()),
        ("name", pl.String()),
        ("image", pl.String()),
        ("order", pl.Float64()),
        ("show_on_home", pl.Boolean()),
        ("depth", pl.Int64()),
        ("parent_id", pl.Int64()),
        ("parent_index", pl.Int64()),
        ("child_count", pl.Int64()),
    ]
)
