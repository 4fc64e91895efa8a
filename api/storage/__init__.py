"""JSON file persistence: bare load/save plus the locked repository built on them."""

from api.storage.json_store import load, save
from api.storage.repository import JsonCollection, Repository, owned_by

__all__ = ["load", "save", "JsonCollection", "Repository", "owned_by"]
