"""Service layer — CLI-facing operations returning ServiceResult.

Services may import from domain, adapters, and the loader.
They must never import from commands or output.
"""
