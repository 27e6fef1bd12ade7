"""ChromaLingo: theming and localization for Qt desktop apps."""

__version__ = "0.3.0"
