import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "en-GB")

    DEFAULT_CURRENCY = "USD"
    QUOTE_VALIDITY_DAYS = 30  # days

    # Load sample quotes and carbon equivalents into the in-memory stores
    SEED_DATA = os.environ.get("SEED_DATA", "1") != "0"

    CHECKOUT_OPTIONS = {
        "climate_action": {"label_key": "sdks.checkout.climateAction", "price": 0.65},
        "round_up": {"label_key": "sdks.checkout.roundUp", "price": 0.85},
    }
    PURCHASE_FOOTPRINT_KG = 21
