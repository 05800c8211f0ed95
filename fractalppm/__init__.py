"""PPM images, colour tables, fractal grids and an interactive command menu."""

__version__ = "1.0.0"