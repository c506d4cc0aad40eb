"""In-memory credential obfuscation."""

from snipekit.vault.guard import CredentialGuard, Secret

__all__ = [
    "CredentialGuard",
    "Secret",
]
