"""Middleware package — Starlette middleware wired in by main.create_app."""
