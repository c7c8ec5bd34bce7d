"""
Credential hashing collaborator.

The core never hashes or compares passwords itself; the host supplies an
object with this shape (e.g. a salted adaptive hash at a fixed cost).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialHasher(Protocol):
    def hash(self, plaintext: str) -> str:
        """Return an opaque, salted hash of plaintext."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """True when plaintext matches a value produced by hash()."""
        ...
