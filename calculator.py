from datetime import datetime, timezone

DEFAULT_MULTIPLIER = 2
DEFAULT_OFFSET = 10


def calculate_x(value, multiplier=None, offset=None):
    """Compute (value * multiplier) + offset, keeping the formula for display."""
    if multiplier is None:
        multiplier = DEFAULT_MULTIPLIER
    if offset is None:
        offset = DEFAULT_OFFSET

    result = (value * multiplier) + offset
    return {
        "result": result,
        "formula": f"({value:.2f} * {multiplier:.2f}) + {offset:.2f} = {result:.2f}",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def calculate_x_batch(values, multiplier=None, offset=None):
    return [calculate_x(value, multiplier, offset) for value in values]
