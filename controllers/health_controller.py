import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from database import session_scope

logger = logging.getLogger(__name__)

router = Blueprint('health_controller', __name__)

@router.route("/health", methods=["GET"])
def health():
    try:
        with session_scope() as db:
            db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return jsonify({"status": "DOWN"}), 503
    return jsonify({"status": "UP"})
