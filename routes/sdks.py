from flask import Blueprint, render_template, current_app, request

sdks_bp = Blueprint("sdks", __name__)


@sdks_bp.route("/")
def home():
    return render_template("sdks/home.html")


@sdks_bp.route("/checkout")
def checkout():
    options = current_app.config["CHECKOUT_OPTIONS"]
    # Climate action is pre-selected, round-up is opt-in
    selected = request.args.getlist("option") or ["climate_action"]
    selected = [name for name in selected if name in options]
    total = sum(options[name]["price"] for name in selected)
    return render_template("sdks/checkout.html", options=options, selected=selected,
                           total=total,
                           footprint=current_app.config["PURCHASE_FOOTPRINT_KG"])


@sdks_bp.route("/post-purchase")
def post_purchase():
    return render_template("sdks/post_purchase.html",
                           footprint=current_app.config["PURCHASE_FOOTPRINT_KG"])
