"""Character synthesis and loading."""

from .generator import generate_custom_character
from .loader import json_to_character, load_character_try_path

__all__ = ["generate_custom_character", "json_to_character", "load_character_try_path"]
