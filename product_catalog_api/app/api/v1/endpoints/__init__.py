"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for a specific
resource.  Resource routers are aggregated in ``router.py`` at the
package level and mounted under the API prefix.
"""
