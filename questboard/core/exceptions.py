class DataSourceError(Exception):
    """Base class for failures raised by a dashboard data source."""


class FetchError(DataSourceError):
    """Network or transport failure while loading a snapshot."""


class ValidationError(DataSourceError):
    """The data source returned a payload that does not match the snapshot model."""
