# guardshift/db.py
from __future__ import annotations

import os
from typing import Optional

import certifi
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import ConfigurationError, ServerSelectionTimeoutError

# Ensure .env variables are loaded
load_dotenv()

DEFAULT_URI = "mongodb://localhost:27017/security_shifts"
DEFAULT_DB = "security_shifts"

_client: MongoClient | None = None
_dbname: str | None = None


def _mongo_uri() -> str:
    return os.getenv("MONGODB_URI", "").strip() or DEFAULT_URI


def _truthy(value: Optional[str]) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _use_tls(uri: str) -> bool:
    """Atlas-style SRV URIs always need TLS; plain URIs only when MONGO_TLS asks for it."""
    flag = os.getenv("MONGO_TLS")
    if flag is not None and flag.strip():
        return _truthy(flag)
    return uri.startswith("mongodb+srv://")


def _timeout_ms() -> int:
    return int(os.getenv("MONGO_TIMEOUT_MS", "20000"))


def _database_name(client: MongoClient) -> str:
    name = os.getenv("MONGO_DB", "").strip()
    if name:
        return name
    try:
        return client.get_default_database().name
    except ConfigurationError:
        # URI carries no database path
        return DEFAULT_DB


def get_db():
    """
    Returns a live DB handle, pinging the server once per process.
    Raises RuntimeError if the connection fails.
    """
    global _client, _dbname
    if _client is None:
        uri = _mongo_uri()
        timeout = _timeout_ms()
        options = dict(
            serverSelectionTimeoutMS=timeout,
            connectTimeoutMS=timeout,
            socketTimeoutMS=timeout,
        )
        if _use_tls(uri):
            options.update(tls=True, tlsCAFile=certifi.where())
        client = MongoClient(uri, **options)
        try:
            client.admin.command("ping")
        except ServerSelectionTimeoutError as e:
            client.close()
            raise RuntimeError(
                "❌ Cannot reach MongoDB.\n"
                "• Is mongod running / is the network reachable?\n"
                "• Verify MONGODB_URI in your .env.\n"
                f"Underlying error: {e}"
            ) from e
        _client = client
        _dbname = _database_name(client)
    return _client[_dbname]


def close_db() -> None:
    global _client, _dbname
    if _client is not None:
        _client.close()
    _client = None
    _dbname = None
