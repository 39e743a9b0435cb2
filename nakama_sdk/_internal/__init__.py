"""Internal modules for Nakama SDK.

WARNING: This package contains system-level modules used by the clients.
These are not intended for direct use in application code.

Modules:
    dispatch - Request spec, body codec and log redaction
    http - Shared HTTP client configuration
"""
