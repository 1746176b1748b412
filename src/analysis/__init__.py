"""Read-only corpus analyses.

This package implements the prevalence ranking, category frequency,
and per-category leader queries over an immutable corpus.
"""
