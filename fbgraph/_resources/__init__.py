"""Resource namespaces for the Graph API client."""

from .friends import Friends
from .graph import Graph
from .users import Users

__all__ = [
    "Friends",
    "Graph",
    "Users",
]
