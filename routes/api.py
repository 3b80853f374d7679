import logging
from collections.abc import Mapping
from datetime import datetime
from numbers import Number

from flask import Blueprint, jsonify, request, g

from calculator import calculate_x, calculate_x_batch
from models.equivalent import Equivalent
from models.quote import Quote, QUOTE_STATUSES
from translations import get_available_locales, get_translations

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def error_response(key, status):
    return jsonify({"error": g.t(key)}), status


def not_found():
    return error_response("errors.notFound", 404)


def invalid():
    return error_response("errors.validationError", 400)


def _is_number(value):
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_text(value):
    return isinstance(value, str) and value != ""


def _optional_text(value):
    return value is None or isinstance(value, str)


def _json_body():
    """Parsed JSON object, {} for an empty body, None for anything else."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _valid_items(items):
    if not isinstance(items, list):
        return False
    return all(isinstance(item, dict) and _is_number(item.get("totalPrice"))
               for item in items)


def _plain(value):
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _parse_date(value):
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return False


# ── Locales ──────────────────────────────────────────────

@api_bp.route("/locales")
def list_locales():
    return jsonify({"locales": get_available_locales(), "current": g.locale})


@api_bp.route("/translations/<locale>")
def translations(locale):
    # UnsupportedLocaleError is mapped to a 404 by the app
    return jsonify(_plain(get_translations(locale)))


# ── Quotes ───────────────────────────────────────────────

@api_bp.route("/quotes", methods=["GET"])
def list_quotes():
    customer_id = request.args.get("customerId")
    status = request.args.get("status")

    if customer_id:
        quotes = Quote.get_by_customer(customer_id)
    elif status:
        quotes = Quote.get_by_status(status)
    else:
        quotes = Quote.get_all()
    return jsonify([q.to_dict() for q in quotes])


@api_bp.route("/quotes", methods=["POST"])
def create_quote():
    data = _json_body()
    if data is None:
        return invalid()
    customer_id = data.get("customerId")
    items = data.get("items")
    valid_until = _parse_date(data.get("validUntil"))

    if not _is_text(customer_id) or not _valid_items(items) or valid_until is False:
        return invalid()
    if not _optional_text(data.get("currency")):
        return invalid()

    quote = Quote.create(customer_id, items, currency=data.get("currency"),
                         valid_until=valid_until)
    logger.info("Created quote %s for %s (%s %s)", quote.id, customer_id,
                quote.total_amount, quote.currency)
    return jsonify(quote.to_dict()), 201


@api_bp.route("/quotes/<quote_id>", methods=["GET"])
def get_quote(quote_id):
    quote = Quote.get_by_id(quote_id)
    if quote is None:
        return not_found()
    return jsonify(quote.to_dict())


@api_bp.route("/quotes/<quote_id>", methods=["PATCH"])
def update_quote(quote_id):
    data = _json_body()
    if data is None:
        return invalid()
    items = data.get("items")
    status = data.get("status")
    valid_until = _parse_date(data.get("validUntil"))

    if items is not None and not _valid_items(items):
        return invalid()
    if not all(_optional_text(data.get(name)) for name in ("customerId", "currency")):
        return invalid()
    if status is not None and status not in QUOTE_STATUSES:
        return invalid()
    if valid_until is False:
        return invalid()

    quote = Quote.update(quote_id, customer_id=data.get("customerId"), items=items,
                         currency=data.get("currency"), valid_until=valid_until,
                         status=status)
    if quote is None:
        return not_found()
    return jsonify(quote.to_dict())


@api_bp.route("/quotes/<quote_id>", methods=["DELETE"])
def delete_quote(quote_id):
    if not Quote.delete(quote_id):
        return not_found()
    return jsonify({"message": f"Quote with ID {quote_id} has been deleted"})


# ── Equivalents ──────────────────────────────────────────

@api_bp.route("/equivalents", methods=["GET"])
def list_equivalents():
    category = request.args.get("category")
    if category:
        equivalents = Equivalent.get_by_category(category)
    else:
        equivalents = Equivalent.get_all()
    return jsonify([e.to_dict() for e in equivalents])


@api_bp.route("/equivalents", methods=["POST"])
def create_equivalent():
    data = _json_body()
    if data is None:
        return invalid()
    category = data.get("category")
    value = data.get("value")
    unit = data.get("unit")
    description = data.get("description")

    if not _is_text(category) or not _is_text(unit) or not _is_number(value):
        return invalid()
    if not _optional_text(description):
        return invalid()

    equivalent = Equivalent.create(category, value, unit, description or "")
    return jsonify(equivalent.to_dict()), 201


@api_bp.route("/equivalents/<equivalent_id>", methods=["GET"])
def get_equivalent(equivalent_id):
    equivalent = Equivalent.get_by_id(equivalent_id)
    if equivalent is None:
        return not_found()
    return jsonify(equivalent.to_dict())


@api_bp.route("/equivalents/<equivalent_id>", methods=["PATCH"])
def update_equivalent(equivalent_id):
    data = _json_body()
    if data is None:
        return invalid()
    if "value" in data and not _is_number(data["value"]):
        return invalid()
    for name in ("category", "unit"):
        if data.get(name) is not None and not _is_text(data[name]):
            return invalid()
    if not _optional_text(data.get("description")):
        return invalid()

    equivalent = Equivalent.update(
        equivalent_id,
        category=data.get("category"),
        value=data.get("value"),
        unit=data.get("unit"),
        description=data.get("description"),
    )
    if equivalent is None:
        return not_found()
    return jsonify(equivalent.to_dict())


@api_bp.route("/equivalents/<equivalent_id>", methods=["DELETE"])
def delete_equivalent(equivalent_id):
    if not Equivalent.delete(equivalent_id):
        return not_found()
    return jsonify({"message": f"Equivalent with ID {equivalent_id} has been deleted"})


# ── Calculator ───────────────────────────────────────────

@api_bp.route("/calculate", methods=["POST"])
def calculate():
    data = _json_body()
    if data is None:
        return invalid()
    multiplier = data.get("multiplier")
    offset = data.get("offset")

    for optional in (multiplier, offset):
        if optional is not None and not _is_number(optional):
            return invalid()

    if "values" in data:
        values = data["values"]
        if not isinstance(values, list) or not all(_is_number(v) for v in values):
            return invalid()
        return jsonify(calculate_x_batch(values, multiplier, offset))

    value = data.get("value")
    if not _is_number(value):
        return invalid()
    return jsonify(calculate_x(value, multiplier, offset))
