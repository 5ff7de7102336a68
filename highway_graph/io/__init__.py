"""Input/output helpers for the highway graph.

This subpackage holds the plain-text formatting of graph summaries and
query results; reading graphs lives with the graph adapters.
"""
