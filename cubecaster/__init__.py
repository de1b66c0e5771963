"""Grid raycaster that renders textured first-person views of tile maps."""

__version__ = "0.1.0"