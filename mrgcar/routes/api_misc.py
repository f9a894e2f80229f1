# mrgcar/routes/api_misc.py
from flask import Blueprint

from mrgcar import responses

bp = Blueprint("misc", __name__)


@bp.get("/health")
def health():
    """Liveness check used by the load balancer and the tests."""
    return responses.success({"status": "ok"})
