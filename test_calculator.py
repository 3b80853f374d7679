from calculator import calculate_x, calculate_x_batch


def test_defaults():
    out = calculate_x(5)
    assert out["result"] == 20
    assert out["formula"] == "(5.00 * 2.00) + 10.00 = 20.00"
    assert out["timestamp"].endswith("+00:00")


def test_explicit_zero_multiplier_and_offset():
    out = calculate_x(5, multiplier=0, offset=0)
    assert out["result"] == 0


def test_batch():
    results = calculate_x_batch([1, 2, 3], multiplier=3, offset=1)
    assert [r["result"] for r in results] == [4, 7, 10]
    assert calculate_x_batch([]) == []
