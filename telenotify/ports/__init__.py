"""Port interfaces (Hexagonal Architecture)."""

from telenotify.ports.inbound import Author, Update
from telenotify.ports.outbound import ConnectionPort

__all__ = [
    "Author",
    "Update",
    "ConnectionPort",
]
