"""HTTP API for the typography helpers (FastAPI)."""
