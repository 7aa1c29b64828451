"""Matrix, text, Fibonacci and client-record utilities, with a client file command."""

__version__ = "0.1.0"
__all__ = ["matrix", "matrix_checks", "sequences", "text", "clients", "cli"]