"""tileplan — tile layout and material estimation for DIY tiling projects."""

__version__ = "0.1.0"
