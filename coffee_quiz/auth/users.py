from __future__ import annotations

import os
from pathlib import Path

import bcrypt
from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_admin: dict[str, str] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def set_admin_password(plain: str) -> None:
    """Replace the admin password. Only the bcrypt hash is kept in memory."""
    _admin["password_hash"] = _hash_password(plain)


def authenticate_admin(password: str) -> bool:
    hashed = _admin.get("password_hash")
    if not password or not hashed:
        return False
    return _verify_password(password, hashed)


set_admin_password(os.environ.get("ADMIN_PASSWORD", "admin123"))
