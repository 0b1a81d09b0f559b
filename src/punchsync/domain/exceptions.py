class PunchSyncError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FormatError(PunchSyncError):
    """Raw data does not have any of the accepted shapes."""


class ConnectivityError(PunchSyncError):
    """The remote data source could not be reached or answered with an error."""
