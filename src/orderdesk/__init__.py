"""
orderdesk
In-memory order store with a GraphQL query/mutation surface
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
