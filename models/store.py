from flask import current_app


class InMemoryStore:
    """Ordered id -> record map with sequential string ids."""

    def __init__(self):
        self._records = {}
        self._next_id = 1

    def next_id(self):
        record_id = str(self._next_id)
        self._next_id += 1
        return record_id

    def get(self, record_id):
        return self._records.get(str(record_id))

    def put(self, record):
        self._records[record.id] = record
        return record

    def remove(self, record_id):
        return self._records.pop(str(record_id), None)

    def all(self):
        return list(self._records.values())

    def filter(self, predicate):
        return [r for r in self._records.values() if predicate(r)]

    def __len__(self):
        return len(self._records)


def get_store(name):
    return current_app.extensions["stores"][name]


def init_app(app):
    from models.equivalent import seed_equivalents
    from models.quote import seed_quotes

    app.extensions["stores"] = {
        "quotes": InMemoryStore(),
        "equivalents": InMemoryStore(),
    }

    if app.config.get("SEED_DATA"):
        with app.app_context():
            seed_quotes()
            seed_equivalents()
