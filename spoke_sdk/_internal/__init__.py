"""Internal modules for Spoke SDK.

These are not intended for direct use in application code.

Modules:
    credentials - API token resolution and caching
    dispatch - Per-call request construction and sending
    http - Shared HTTP client configuration
"""
