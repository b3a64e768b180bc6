import bcrypt


class PasswordHasher:
    """One-way bcrypt hashing with a fresh salt per call.

    Digests of the same plaintext differ between calls, so never compare
    digests directly; use `verify`.
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Recompute with the salt embedded in `digest` and compare in constant time."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Malformed digest ("Invalid salt")
            return False
