"""v1 router package — all /api/v1/* endpoints live here.

Files:
  directory.py  — directory view, filter and page mutations, options and status

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to company_directory/services/.
"""
