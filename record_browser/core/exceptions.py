class RecordBrowserError(Exception):
    """Base exception for all record_browser errors"""
    pass

class ConfigError(RecordBrowserError):
    """Invalid or inconsistent global.json or environment override"""
    pass

class LoadFailure(RecordBrowserError):
    """
    The one-shot record fetch failed: network error, non-success status,
    or a payload that is not a JSON array of records.
    """
    pass
