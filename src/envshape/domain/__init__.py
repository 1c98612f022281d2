"""Domain layer — field nodes, introspection, and coercion rules.

This layer depends only on stdlib.
It must never import from adapters, services, commands, or config.
"""
