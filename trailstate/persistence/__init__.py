"""
Persistence package for machine configuration documents.

Reads and writes the JSON configuration format consumed by StateMachine.
History is runtime-only and is not part of this package.
"""

from .serializer import dump, dumps, load, loads

__all__ = ["dump", "dumps", "load", "loads"]
