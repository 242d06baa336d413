import random

import pytest

from chartviz.random_function import RandomFunctionPicker


def test_pick_returns_listed_function():
    functions = ["sin(x)", "x^2", "ln(x)"]
    picker = RandomFunctionPicker(functions, random.Random(1))
    for _ in range(20):
        assert picker.pick() in functions


def test_single_function_always_picked():
    picker = RandomFunctionPicker(["cos(x)"], random.Random(5))
    assert {picker.pick() for _ in range(10)} == {"cos(x)"}


def test_same_seed_same_sequence():
    functions = ["a", "b", "c", "d"]
    first = RandomFunctionPicker(functions, random.Random(42))
    second = RandomFunctionPicker(functions, random.Random(42))
    assert [first.pick() for _ in range(15)] == [second.pick() for _ in range(15)]


def test_all_functions_eventually_picked():
    functions = ["a", "b", "c"]
    picker = RandomFunctionPicker(functions, random.Random(3))
    assert {picker.pick() for _ in range(200)} == set(functions)


def test_empty_list_raises():
    with pytest.raises(ValueError):
        RandomFunctionPicker([])


def test_from_file_splits_on_whitespace(tmp_path):
    path = tmp_path / "functions.txt"
    path.write_text("sin(x)\nx^2  abs(x)\n\nexp(x)\n", encoding="utf-8")
    picker = RandomFunctionPicker.from_file(path, random.Random(0))
    assert picker.functions == ["sin(x)", "x^2", "abs(x)", "exp(x)"]
    assert picker.pick() in picker.functions


def test_from_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("   \n", encoding="utf-8")
    with pytest.raises(ValueError):
        RandomFunctionPicker.from_file(path)


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        RandomFunctionPicker.from_file(tmp_path / "missing.txt")