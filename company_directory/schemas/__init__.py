"""Pydantic schemas package.

Folder intent:
  common.py     — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  directory.py  — company rows, filter bodies, directory view / status / options responses
"""
