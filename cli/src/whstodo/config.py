"""Config module - loads settings, initializes storage lazily.

Only commands that bypass the API (admin create) touch storage directly.
"""

_settings = None
_storage_initialized = False


def get_config():
    """Load settings and configure storage on first access."""
    global _settings, _storage_initialized
    if _settings is None:
        from storage.config import get_settings
        _settings = get_settings()
    if not _storage_initialized:
        from storage.bootstrap import configure_storage
        configure_storage(_settings)
        _storage_initialized = True
    return _settings
