"""Application layer - Use cases orchestrating domain and adapters."""
