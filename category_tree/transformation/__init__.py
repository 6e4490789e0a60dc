"""
Transformation Layer - Pure, Deterministic Functions

This layer contains all category tree business logic.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
