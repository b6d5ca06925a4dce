"""
Password hashing using bcrypt.
"""

import bcrypt

from shared.validators import validate_password


class PasswordHasher:
    """
    Hashes and verifies passwords with bcrypt.

    bcrypt only reads the first 72 bytes of its input, and recent releases
    refuse anything longer, so both hash() and verify() truncate to that
    length. Two passwords sharing their first 72 bytes are equivalent.

    Examples
    --------
    >>> hasher = PasswordHasher(rounds=4)
    >>> digest = hasher.hash("secret1")
    >>> hasher.verify("secret1", digest)
    True
    >>> hasher.verify("secret2", digest)
    False
    """

    MAX_BYTES = 72

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            WeakPasswordError: If the password is empty or shorter than 6 characters
        """
        validate_password(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a digest. Any malformed input gives False."""
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            # not a bcrypt digest
            return False

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[: self.MAX_BYTES]
