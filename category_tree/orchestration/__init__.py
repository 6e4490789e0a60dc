"""
Orchestration Layer - Pipeline Coordination

Wires the extract and transformation layers together.
"""

from .pipeline import run_category_pipeline

__all__ = ["run_category_pipeline"]
