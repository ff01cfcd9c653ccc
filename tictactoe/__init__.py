"""Server-authoritative Tic-Tac-Toe served over RPC endpoints."""

__version__ = "0.1.0"
