"""Gronsfeld, Vigenere and Hill ciphers over bytes, with an interactive console menu."""

__version__ = "0.1.0"
__all__ = ["gronsfeld", "vigenere", "hill", "console", "cli"]