from datetime import datetime, timedelta, timezone

from flask import current_app

from models.store import get_store

QUOTE_STATUSES = ("draft", "pending", "accepted", "rejected", "expired")

SAMPLE_QUOTES = [
    {
        "customerId": "customer-1",
        "items": [
            {"productId": "carbon-offset-1", "quantity": 100, "unitPrice": 15, "totalPrice": 1500},
            {"productId": "tree-planting-1", "quantity": 50, "unitPrice": 25, "totalPrice": 1250},
        ],
        "currency": "USD",
    },
    {
        "customerId": "customer-2",
        "items": [
            {"productId": "solar-energy-1", "quantity": 200, "unitPrice": 30, "totalPrice": 6000},
        ],
        "currency": "USD",
    },
]


def _now():
    return datetime.now(timezone.utc)


def sum_line_items(items):
    return sum(item["totalPrice"] for item in items)


class Quote:
    def __init__(self, id, customer_id, items, total_amount, currency, status,
                 valid_until, created_at, updated_at):
        self.id = id
        self.customer_id = customer_id
        self.items = items
        self.total_amount = total_amount
        self.currency = currency
        self.status = status
        self.valid_until = valid_until
        self.created_at = created_at
        self.updated_at = updated_at

    def to_dict(self):
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "items": [dict(item) for item in self.items],
            "totalAmount": self.total_amount,
            "currency": self.currency,
            "status": self.status,
            "validUntil": self.valid_until.isoformat(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @staticmethod
    def create(customer_id, items, currency=None, valid_until=None, status="draft"):
        store = get_store("quotes")
        now = _now()
        if valid_until is None:
            valid_until = now + timedelta(days=current_app.config["QUOTE_VALIDITY_DAYS"])

        quote = Quote(
            id=store.next_id(),
            customer_id=customer_id,
            items=[dict(item) for item in items],
            total_amount=sum_line_items(items),
            currency=currency or current_app.config["DEFAULT_CURRENCY"],
            status=status,
            valid_until=valid_until,
            created_at=now,
            updated_at=now,
        )
        return store.put(quote)

    @staticmethod
    def get_by_id(quote_id):
        return get_store("quotes").get(quote_id)

    @staticmethod
    def get_all():
        return get_store("quotes").all()

    @staticmethod
    def get_by_customer(customer_id):
        return get_store("quotes").filter(lambda q: q.customer_id == customer_id)

    @staticmethod
    def get_by_status(status):
        return get_store("quotes").filter(lambda q: q.status == status)

    @staticmethod
    def update(quote_id, customer_id=None, items=None, currency=None,
               valid_until=None, status=None):
        quote = Quote.get_by_id(quote_id)
        if quote is None:
            return None

        if customer_id is not None:
            quote.customer_id = customer_id
        if items is not None:
            # Total only changes when line items do
            quote.items = [dict(item) for item in items]
            quote.total_amount = sum_line_items(items)
        if currency is not None:
            quote.currency = currency
        if valid_until is not None:
            quote.valid_until = valid_until
        if status is not None:
            quote.status = status
        quote.updated_at = _now()
        return quote

    @staticmethod
    def delete(quote_id):
        return get_store("quotes").remove(quote_id) is not None


def seed_quotes():
    for data in SAMPLE_QUOTES:
        Quote.create(data["customerId"], data["items"], currency=data["currency"],
                     status="pending")
