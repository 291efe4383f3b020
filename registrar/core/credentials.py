import hashlib
import hmac
import os

from .interfaces import PasswordHasher


class PBKDF2PasswordHasher(PasswordHasher):
    """Salted PBKDF2-SHA256 hashes stored as ``algorithm$iterations$salt$digest``."""

    algorithm = "pbkdf2_sha256"

    def __init__(self, iterations: int = 260000, salt_bytes: int = 16):
        self.iterations = iterations
        self.salt_bytes = salt_bytes

    def _derive(self, password, salt, iterations):
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)

    def hash(self, password):
        salt = os.urandom(self.salt_bytes)
        digest = self._derive(password, salt, self.iterations)
        return f"{self.algorithm}${self.iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password, password_hash):
        try:
            algorithm, iterations, salt_hex, digest_hex = password_hash.split("$")
            if algorithm != self.algorithm:
                return False
            candidate = self._derive(password, bytes.fromhex(salt_hex), int(iterations))
        except (AttributeError, TypeError, ValueError):
            # Stored value is not a hash this class produced.
            return False
        return hmac.compare_digest(candidate.hex(), digest_hex)
