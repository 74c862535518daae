from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import MalformedRequest, RowNotFound, StoreError
from .schemas import CreateUserRequest, UpdateUserRequest, decode_user_id

logger = logging.getLogger(__name__)


def describe_store_error(exc: StoreError) -> str:
    """Debug rendering of the error that actually came out of the store."""
    return repr(exc.__cause__ if exc.__cause__ is not None else exc)


def register(app: Flask, container: Container) -> None:
    service = container.user_service

    @app.errorhandler(MalformedRequest)
    def malformed_request(e: MalformedRequest):
        return jsonify(str(e)), 400

    @app.errorhandler(StoreError)
    def store_error(e: StoreError):
        if isinstance(e, RowNotFound) and app.config.get("NOT_FOUND_AS_404", False):
            return jsonify(str(e)), 404
        logger.error("Store error on %s %s: %s", request.method, request.path, describe_store_error(e))
        return jsonify(describe_store_error(e)), 500

    def _json_body():
        # None for non-JSON content types and unparsable bodies alike.
        return request.get_json(silent=True)

    @app.route("/users", methods=["GET"], endpoint="get_users")
    def get_users():
        users = service.list_users()
        return jsonify([u.to_dict() for u in users]), 200

    @app.route("/users/<user_id>", methods=["GET"], endpoint="get_user_by_id")
    def get_user_by_id(user_id: str):
        user = service.get_user(decode_user_id(user_id))
        return jsonify(user.to_dict()), 200

    @app.route("/users", methods=["POST"], endpoint="add_user")
    def add_user():
        req = CreateUserRequest.from_json(_json_body())
        user = service.create_user(req)
        return jsonify(user.to_dict()), 201

    @app.route("/users/<user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: str):
        uid = decode_user_id(user_id)
        req = UpdateUserRequest.from_json(_json_body())
        user = service.update_user(uid, req)
        return jsonify(user.to_dict()), 200

    @app.route("/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: str):
        user = service.delete_user(decode_user_id(user_id))
        return jsonify(user.to_dict()), 200
