"""vd2svg — Android VectorDrawable to SVG converter."""

__version__ = "0.1.0"
