from .room import generate_entities, generate_map, make_player, make_world

__all__ = ["generate_entities", "generate_map", "make_player", "make_world"]
