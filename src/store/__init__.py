"""Report output layer.

This package writes analysis results as tables and exposes the SDK
client that ties ingest, analysis, and export together.
"""
