"""Replace one color (or every color) in a raster image and save a copy."""

__version__ = "0.1.0"
