"""Routers package — HTTP endpoint definitions.

Files:
  deps.py   — FastAPI dependencies shared by the routers
  pages.py  — Browser viewer (GET /)
  v1/       — Versioned API routes (/api/v1/*)
"""
