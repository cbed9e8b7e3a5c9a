"""FileGate: a subscription gated file distribution API.

The package is laid out in layers: ``domain`` holds entities and errors,
``infrastructure`` the database, storage and security adapters,
``application`` the use cases and ``interfaces`` the HTTP API.
"""
