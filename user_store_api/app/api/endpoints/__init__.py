"""
Endpoint subpackage.

Each module defines an APIRouter for one part of the surface (the root
greeting and the users collection).  They are aggregated in
``api/router.py``.
"""
