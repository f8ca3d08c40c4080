"""In-memory book catalog with an HTTP API and a text menu."""
