"""State container and its observable adapter."""

from reductor.store.observable import StateObservable, Subscription
from reductor.store.store import Store, create_store

__all__ = ["StateObservable", "Store", "Subscription", "create_store"]
