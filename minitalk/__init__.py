"""Text messaging between processes over SIGUSR1 and SIGUSR2, with small parsing and printing helpers."""

__version__ = "0.1.0"

__all__ = ["client", "numparse", "printf", "protocol", "server", "strutil"]