"""
Endpoint subpackage.

Each module defines an APIRouter for one concern.  Domain routers are
aggregated in ``api/router.py``.
"""
