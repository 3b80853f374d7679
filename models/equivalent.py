from datetime import datetime, timezone

from models.store import get_store

SAMPLE_EQUIVALENTS = [
    {"category": "transportation", "value": 4.6, "unit": "kg CO2",
     "description": "Average car trip of 10 miles"},
    {"category": "energy", "value": 0.5, "unit": "kg CO2",
     "description": "1 kWh of electricity"},
    {"category": "lifestyle", "value": 2.5, "unit": "kg CO2",
     "description": "One meal with beef"},
]


class Equivalent:
    """A carbon equivalent, e.g. how much CO2 one car trip emits."""

    def __init__(self, id, category, value, unit, description, created_at, updated_at):
        self.id = id
        self.category = category
        self.value = value
        self.unit = unit
        self.description = description
        self.created_at = created_at
        self.updated_at = updated_at

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "value": self.value,
            "unit": self.unit,
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @staticmethod
    def create(category, value, unit, description):
        store = get_store("equivalents")
        now = datetime.now(timezone.utc)
        return store.put(Equivalent(
            id=store.next_id(),
            category=category,
            value=value,
            unit=unit,
            description=description,
            created_at=now,
            updated_at=now,
        ))

    @staticmethod
    def get_by_id(equivalent_id):
        return get_store("equivalents").get(equivalent_id)

    @staticmethod
    def get_all():
        return get_store("equivalents").all()

    @staticmethod
    def get_by_category(category):
        wanted = category.lower()
        return get_store("equivalents").filter(lambda e: e.category.lower() == wanted)

    @staticmethod
    def update(equivalent_id, **fields):
        equivalent = Equivalent.get_by_id(equivalent_id)
        if equivalent is None:
            return None
        for name in ("category", "value", "unit", "description"):
            if fields.get(name) is not None:
                setattr(equivalent, name, fields[name])
        equivalent.updated_at = datetime.now(timezone.utc)
        return equivalent

    @staticmethod
    def delete(equivalent_id):
        return get_store("equivalents").remove(equivalent_id) is not None


def seed_equivalents():
    for data in SAMPLE_EQUIVALENTS:
        Equivalent.create(**data)
