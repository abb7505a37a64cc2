"""Floor structure documents."""

from .structure import floor_from_dict, floor_to_dict, load_floor, load_walls, save_floor

__all__ = ["floor_from_dict", "floor_to_dict", "load_floor", "load_walls", "save_floor"]
