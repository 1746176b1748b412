"""Domain document ingestion.

This package discovers and parses per-domain documents and aggregates
their expanded rows into the corpus consumed by the analysis layer.
"""
