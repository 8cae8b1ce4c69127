from .normalize import field_from_values, fields_from_frame

__all__ = ["field_from_values", "fields_from_frame"]
