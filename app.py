import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from flask import Flask, jsonify, render_template, session, redirect, request, url_for, g
from flask_wtf.csrf import CSRFProtect

from config import Config
from logger import configure_logging, get_logger, log_error
from models.store import init_app as init_store_app
from translations import (DEFAULT_LOCALE, LOCALE_LABELS, UnsupportedLocaleError,
                          create_translator, get_available_locales, get_translator,
                          is_valid_locale)

logger = get_logger(__name__)


def resolve_locale(default):
    """Pick the request locale: ?locale=, then the session, then the default."""
    for candidate in (request.args.get("locale"), session.get("locale")):
        if is_valid_locale(candidate):
            return candidate
    return default if is_valid_locale(default) else DEFAULT_LOCALE


def current_translator():
    return g.get("t") or get_translator(g.get("locale"))


def locale_url(locale):
    """Current URL with its query string switched to another locale."""
    if request.endpoint is None:
        return url_for("pages.dashboard", locale=locale)
    args = request.args.to_dict()
    args.update(request.view_args or {})
    args["locale"] = locale
    return url_for(request.endpoint, **args)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config["LOG_LEVEL"])

    # Extensions
    csrf = CSRFProtect(app)

    # In-memory quote and equivalent stores
    init_store_app(app)

    @app.before_request
    def bind_translator():
        g.locale = resolve_locale(app.config["DEFAULT_LOCALE"])
        g.t = create_translator(g.locale)

    # Template context - make the translator and locale picker data available everywhere
    @app.context_processor
    def inject_globals():
        return {
            "t": current_translator(),
            "locale": g.get("locale", app.config["DEFAULT_LOCALE"]),
            "locales": get_available_locales(),
            "locale_labels": LOCALE_LABELS,
            "locale_url": locale_url,
        }

    @app.route("/set-language/<locale>")
    def set_language(locale):
        if is_valid_locale(locale):
            session["locale"] = locale
        else:
            logger.info("Ignoring unsupported locale %s", locale)
        return redirect(request.referrer or "/")

    # Blueprints
    from routes.pages import pages_bp
    from routes.sdks import sdks_bp
    from routes.api import api_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(sdks_bp, url_prefix="/sdks")
    app.register_blueprint(api_bp, url_prefix="/api")

    # Exempt API from CSRF
    csrf.exempt(api_bp)

    # Error handlers
    @app.errorhandler(UnsupportedLocaleError)
    def unsupported_locale(e):
        return jsonify({"error": str(e), "locales": get_available_locales()}), 404

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": current_translator()("errors.notFound")}), 404
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def server_error(e):
        log_error(logger, f"Unhandled error on {request.path}", e)
        return render_template("errors/500.html"), 500

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, use_reloader=False)
