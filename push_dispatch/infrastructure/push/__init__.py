"""Push gateway and dispatch scheduling helpers for the infrastructure layer."""

from .gateway import (
    FirebasePushGateway,
    PushGateway,
    delete_firebase_app,
    initialize_firebase_app,
)
from .trigger import DispatchTrigger, Trigger

__all__ = [
    "FirebasePushGateway",
    "PushGateway",
    "delete_firebase_app",
    "initialize_firebase_app",
    "DispatchTrigger",
    "Trigger",
]
