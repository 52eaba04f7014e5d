"""FastAPI web application for FloraScan."""
