"""
Credential Guard - Password obfuscation in memory.

Path: snipekit/vault/guard.py

Keeps the user's password XORed with a one-time random pad so the
plaintext is not (usually) obvious in a memory dump. This is a deterrent
against casual memory scraping, not encryption: anyone who can read the
pad alongside the buffer recovers the password.

Usage:
    guard = CredentialGuard(RandomSource.from_process())
    guard.load(password)
    guard.protect()

    with guard.revealed() as plaintext:
        login(username, plaintext)

    guard.dispose()
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from snipekit.core.random_source import RandomSource


logger = logging.getLogger(__name__)


class Secret:
    """
    Read-only view of the guarded buffer.

    Exposes the raw bytes (plaintext or obfuscated, depending on state)
    for inspection. The pad is never reachable from here.
    """

    __slots__ = ("_guard",)

    def __init__(self, guard: "CredentialGuard"):
        self._guard = guard

    @property
    def buffer(self) -> Optional[bytearray]:
        return self._guard._buffer

    @property
    def obfuscated(self) -> bool:
        return self._guard._obfuscated

    def __len__(self) -> int:
        return len(self._guard)

    def __repr__(self) -> str:
        state = "obfuscated" if self.obfuscated else "plaintext"
        return f"<Secret len={len(self)} {state}>"


class CredentialGuard:
    """
    Owns one secret and its pad.

    The pad is generated lazily on the first protect() and kept for the
    lifetime of the secret. Loading a new password disposes the old
    secret and pad first, so a pad is never reused for another plaintext.

    Not safe for concurrent use; guard with a lock if shared.
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize guard.

        Args:
            random_source: Byte source for pad and disposal. If None,
                           one is seeded from process id and time.
        """
        self._random = random_source or RandomSource.from_process()
        self._buffer: Optional[bytearray] = None
        self._pad: Optional[bytearray] = None
        self._obfuscated = False

    def __len__(self) -> int:
        return len(self._buffer) if self._buffer is not None else 0

    def __repr__(self) -> str:
        return f"<CredentialGuard set={self.is_set} obfuscated={self._obfuscated}>"

    @property
    def is_set(self) -> bool:
        """Check if a secret is currently held."""
        return self._buffer is not None

    @property
    def obfuscated(self) -> bool:
        return self._obfuscated

    @property
    def secret(self) -> Secret:
        return Secret(self)

    def load(self, password: Union[str, bytes, bytearray, None]):
        """
        Replace the current secret with a new plaintext.

        Any existing secret and pad are disposed first. None or empty
        leaves the guard empty.

        Args:
            password: Plaintext password. Strings are encoded as UTF-8.
        """
        self.dispose()

        if not password:
            return

        if isinstance(password, str):
            password = password.encode("utf-8")

        self._buffer = bytearray(password)
        self._obfuscated = False
        logger.debug("Loaded secret (%d bytes)", len(self._buffer))

    def protect(self):
        """XOR the secret with the pad. No-op if empty or already obfuscated."""
        if self._obfuscated or not self._buffer:
            return

        if self._pad is None:
            self._pad = self._random.token(len(self._buffer))

        self._xor_pad()
        self._obfuscated = True
        logger.debug("Secret obfuscated")

    def reveal(self):
        """Undo protect(). No-op unless obfuscated with a pad present."""
        if not self._obfuscated or self._buffer is None or self._pad is None:
            return

        self._xor_pad()
        self._obfuscated = False
        logger.debug("Secret revealed")

    def dispose(self):
        """
        Overwrite secret and pad with random bytes, then release them.

        Random bytes rather than zeros, so no fixed pattern is left behind.
        The guard returns to its empty state and can accept a new secret.
        """
        had_secret = self._buffer is not None

        if self._buffer is not None:
            self._random.fill(self._buffer)
        if self._pad is not None:
            self._random.fill(self._pad)

        self._buffer = None
        self._pad = None
        self._obfuscated = False

        if had_secret:
            logger.debug("Secret disposed")

    @contextmanager
    def revealed(self) -> Iterator[bytes]:
        """
        Temporarily reveal the secret.

        Yields the plaintext bytes and re-protects on exit, even if the
        body raises. Yields b"" when no secret is held.
        """
        self.reveal()
        try:
            yield bytes(self._buffer) if self._buffer else b""
        finally:
            self.protect()

    def password(self) -> Optional[str]:
        """Return the plaintext password as a string, leaving it protected."""
        if not self.is_set:
            return None
        with self.revealed() as plaintext:
            return plaintext.decode("utf-8")

    def _xor_pad(self):
        buffer = self._buffer
        pad = self._pad
        for i in range(len(buffer)):
            buffer[i] ^= pad[i]
