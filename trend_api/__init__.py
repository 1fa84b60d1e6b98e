"""FastAPI service exposing the trend analyzer over HTTP."""
