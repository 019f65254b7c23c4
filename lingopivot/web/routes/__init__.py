"""API and streaming routes."""
