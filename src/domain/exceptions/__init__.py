from .transit import TransitDataError, UnknownStop, UnknownVehicle

__all__ = ["TransitDataError", "UnknownStop", "UnknownVehicle"]
