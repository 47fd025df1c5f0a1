"""Room domain services: codes, storage, lifecycle and expiry.

Nothing in this package touches sockets or Flask request state. Outbound
messages leave through the ``notify`` callable handed to the lifecycle
manager, so the same code runs under the Socket.IO gateway and in unit
tests.
"""
