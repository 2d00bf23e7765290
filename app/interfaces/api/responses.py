"""Success envelope shared by every route: {"message": ..., "data": ...}."""

from typing import Any


def envelope(message: str, data: Any = None) -> dict:
    return {"message": message, "data": data}


def deleted(message: str, id: int) -> dict:
    return envelope(message, {"id": id})
