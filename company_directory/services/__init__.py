"""Services package — all business logic lives here, never in routers.

Files:
  directory.py  — DirectoryService: startup fetch, filter/page mutations, view snapshots

Rule: routers call services, services call repositories, repositories call the network.
      No httpx calls in routers. No FastAPI imports in services.
"""
