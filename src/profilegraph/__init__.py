"""
Profile GraphQL service
Schema-driven GraphQL endpoint over a document store of profiles
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
