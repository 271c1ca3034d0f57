"""Contacts-related API routes."""

from flask import Blueprint, current_app, jsonify, request

from curem.services.contacts_service import ContactService
from curem.utils.error_handler import ValidationError, handle_errors
from curem.utils.validators import InputValidator

contacts_bp = Blueprint('contacts', __name__, url_prefix='/api/contacts')


def _service() -> ContactService:
    return current_app.extensions["curem.contacts"]


@contacts_bp.route("", methods=["GET"])
@handle_errors
def list_contacts():
    """All contacts"""
    contacts = _service().get_all()
    return jsonify({"contacts": [c.public_dict() for c in contacts], "count": len(contacts)}), 200


@contacts_bp.route("", methods=["POST"])
@handle_errors
def create_contact():
    """Create a contact from a JSON body; `slug` is optional"""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid request format")
    contact = _service().new_contact(
        company=data.get("company", ""),
        person=data.get("person", ""),
        email=data.get("email", ""),
        phone=data.get("phone", ""),
        slug_hint=data.get("slug", ""),
        country=data.get("country", ""),
    )
    return jsonify(contact.public_dict()), 201


@contacts_bp.route("/<slug>", methods=["GET"])
@handle_errors
def get_contact(slug: str):
    return jsonify(_service().get_by_slug(slug).public_dict()), 200


@contacts_bp.route("/<slug>", methods=["PUT"])
@handle_errors
def update_contact(slug: str):
    """Load, apply the given mutable fields, then replace the stored document"""
    service = _service()
    changes = InputValidator.validate_update_fields(request.get_json(silent=True))
    contact = service.get_by_slug(slug).model_copy(update=changes)
    service.update(contact)
    return jsonify(contact.public_dict()), 200


@contacts_bp.route("/<slug>", methods=["DELETE"])
@handle_errors
def delete_contact(slug: str):
    service = _service()
    service.delete(service.get_by_slug(slug))
    return "", 204


@contacts_bp.route("/<slug>/regenerate-slug", methods=["POST"])
@handle_errors
def regenerate_slug(slug: str):
    service = _service()
    contact = service.regenerate_slug(service.get_by_slug(slug))
    return jsonify(contact.public_dict()), 200
