from .names import class_name, nation_name

__all__ = ["class_name", "nation_name"]
