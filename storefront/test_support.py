from flask import Blueprint
from storefront.extensions import get_services
from storefront.utils.responses import ok
import logging


test_support_bp = Blueprint("test_support_bp", __name__)


@test_support_bp.route("/__ok", methods=["GET"])
def __ok():
    return ok({"ping": "pong"})


@test_support_bp.route("/__boom", methods=["GET"])
def __boom():
    raise RuntimeError("boom")


@test_support_bp.route("/__log", methods=["GET"])
def __log():
    logging.getLogger(__name__).info("test log line")
    return ok({"logged": True})


@test_support_bp.route("/__reset", methods=["POST"])
def __reset():
    """Restore the seeded store between test scenarios."""
    get_services().store.reset()
    return ok({"reset": True})
