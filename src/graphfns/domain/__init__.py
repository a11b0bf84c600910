"""Domain layer — the adjacency-matrix graph and its pure algorithms.

This layer depends only on stdlib and pydantic.
It must never import from infrastructure, output, or config.
"""
