class AgencyDashError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RemoteStoreError(AgencyDashError):
    """A call to the remote data store failed (transport, HTTP status or database error)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
