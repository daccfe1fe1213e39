"""Web framework adapters exposing the dashboard endpoints."""
