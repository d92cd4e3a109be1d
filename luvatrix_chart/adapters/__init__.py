from .normalize import coerce_values, datum_value, point_xy

__all__ = ["coerce_values", "datum_value", "point_xy"]
