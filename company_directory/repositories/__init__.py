"""Repositories package — data access. Here the only source is the upstream HTTP list."""
