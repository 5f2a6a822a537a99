"""Domain layer.

Mapping metadata (construct kinds, directives, element descriptors) and the
services that classify domain types and build class mappings for them.
"""
