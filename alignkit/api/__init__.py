"""HTTP API for alignkit."""
