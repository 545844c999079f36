"""
Eventboard - event catalog synchronization over MongoDB.

This package contains the event catalog synchronization layer: domain
models, the document store contract and its MongoDB implementation, the
catalog/favorites/CRUD use cases, the view controllers and the DI wiring
that composes them.
"""
