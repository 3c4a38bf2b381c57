"""
Request body helpers shared by the blueprints.
"""

from flask import request

from services import ValidationError


def json_object_body():
    """The request's JSON body as a dict; a missing or unparseable body is empty."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError('request body must be a JSON object')
    return payload
