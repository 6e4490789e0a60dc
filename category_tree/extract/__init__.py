"""
Extract Layer - Category Catalog Source

This layer hands the raw category catalog to the transform layer.
- No imports from the transformation layer
- Returns the decoded API response body untouched
- I/O errors propagate to the caller
"""
