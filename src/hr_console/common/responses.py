from __future__ import annotations

from flask import jsonify, request

from .serializers import to_json


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **{k: to_json(v) for k, v in payload.items()}}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    """Request JSON as a dict; an empty or non-object body reads as {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
