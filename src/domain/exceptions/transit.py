class TransitDataError(Exception):
    """Base exception for lookups against the transit data sources."""


class UnknownStop(TransitDataError):
    """Raised when a stop has no timetable in the data source."""


class UnknownVehicle(TransitDataError):
    """Raised when tracking is requested for a vehicle with no snapshot."""
