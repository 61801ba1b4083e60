"""Infrastructure adapters: auth, HTTP API, email and storage."""
