"""linkexploder - build Obsidian canvases from a note's link neighborhood."""

__version__ = "0.1.0"
