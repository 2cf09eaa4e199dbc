"""
Mapgraph
GraphQL API for maps, places, routes and live traffic/weather updates
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
