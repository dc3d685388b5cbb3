from .data_store import DataStore, LoadStatus

__all__ = ["DataStore", "LoadStatus"]
