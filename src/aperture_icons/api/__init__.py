"""HTTP surface: the FastAPI icon application and its server entry point."""
