"""User interfaces for beatlist."""
