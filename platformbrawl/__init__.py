"""A small side-view platform brawler: items, maps, a character, scenes and a pygame window."""

__version__ = "0.1.0"