"""Resource archive packing, localized message tables and text helpers for a puzzle game."""

__version__ = "1.0.0"
__all__ = ["args", "buffer", "compressor", "convert", "errors", "format",
           "formatter", "i18n", "lexal", "messages"]