"""C-style runtime helpers: ctype, rand48, strings, printf, scanf and a console."""

__version__ = "0.1.0"
__all__ = ["ctype", "rand48", "strings", "printf", "scanf", "terminal"]