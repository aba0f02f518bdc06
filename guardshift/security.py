# guardshift/security.py
import os

import bcrypt
from dotenv import load_dotenv

load_dotenv()


def default_rounds() -> int:
    return int(os.getenv("BCRYPT_ROUNDS", "10"))


def hash_password(plain: str, rounds: int | None = None) -> str:
    """bcrypt hash as a str, ready to store in a user document."""
    salt = bcrypt.gensalt(rounds=rounds or default_rounds())
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")


def check_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
