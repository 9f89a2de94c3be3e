import logging
import re

from flask import Blueprint, current_app, jsonify, request

from ..services.auth import token_required
from ..services.repository import TaskRepository

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)

MIN_DESCRIPTION_LENGTH = 3

TASK_ID_PATTERN = re.compile(r"-?[0-9]+")


def get_repository() -> TaskRepository:
    return current_app.extensions["task_repository"]


def parse_task_id(raw):
    """Turn the URL segment into an int, or None when it isn't a plain number."""
    # int() alone would also take "1_0", " 7" and non-ASCII digits
    if not TASK_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


@tasks_bp.route("/", methods=["GET"])
def list_tasks():
    tasks = get_repository().get_all()
    return jsonify([task.to_dict() for task in tasks]), 200


@tasks_bp.route("/create", methods=["POST"])
@token_required
def create_task():
    # Bodies that aren't JSON are treated like an empty body
    data = request.get_json() if request.is_json else None
    task = data.get("task") if isinstance(data, dict) else None

    description = task.get("description") if isinstance(task, dict) else None
    if not description or not isinstance(description, str):
        return jsonify({"error": "Task is required"}), 400

    if len(description) < MIN_DESCRIPTION_LENGTH:
        return jsonify(
            {"error": f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters long"}
        ), 400

    created = get_repository().create(description)
    logger.info(f"Created task {created.id}")
    return jsonify(created.to_dict()), 201


@tasks_bp.route("/<task_id>", methods=["DELETE"])
@token_required
def delete_task(task_id):
    # A non-numeric id can't match anything, so it is simply not found
    parsed = parse_task_id(task_id)
    if parsed is not None and get_repository().remove(parsed):
        logger.info(f"Deleted task {parsed}")
        return "", 204

    return jsonify({"error": "Task not found"}), 404
