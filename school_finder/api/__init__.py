"""HTTP layer for the school service.

Holds the request schemas, the wire serializers and the routes. Submodules
are not imported here so that importing the package has no side effects.
- api package
"""

__all__ = []
