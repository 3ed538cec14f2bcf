"""Core layer: rule model, matching engine, and domain values.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
