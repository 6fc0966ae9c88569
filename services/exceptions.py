"""
Dashboard custom exceptions.
Every error carries a message and a status-like code for the presentation layer.
"""

class DashboardError(Exception):
    """Base exception for the enrollment dashboard"""
    def __init__(self, message: str, code: int = 400):
        self.message = message
        self.code = code
        super().__init__(self.message)

class DataUnavailable(DashboardError):
    """Record source query failed"""
    def __init__(self, message: str = "Failed to load student data."):
        super().__init__(message, 503)

class MalformedRecord(DashboardError):
    """Record has a missing or unrecognized track/status"""
    def __init__(self, message: str = "Malformed enrollment record"):
        super().__init__(message, 422)

class RecordNotFound(DashboardError):
    """Selected record is not in the working set"""
    def __init__(self, message: str = "Record not found"):
        super().__init__(message, 404)
