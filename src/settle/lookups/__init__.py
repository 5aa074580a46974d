"""Network lookup predicates ("does this value already exist?")."""

from settle.lookups.http import AsyncHttpLookup, HttpLookup

__all__ = [
    "AsyncHttpLookup",
    "HttpLookup",
]
