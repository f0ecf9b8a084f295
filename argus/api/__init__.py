"""HTTP API for the mandate workflow engine (FastAPI)."""
