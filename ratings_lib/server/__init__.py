"""Server-level endpoints (health) and HTTP error translation."""
