"""Print-friendly renderer for Persian poems from ganjoor.net."""

__version__ = "1.0.0"
