"""Engine support utilities: helpers, timing, commands, INI and OBJ loading, and image writers."""

__version__ = "0.1.0"