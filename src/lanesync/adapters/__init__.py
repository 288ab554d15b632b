"""I/O adapters (remote projects backend)."""
