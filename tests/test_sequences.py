from __future__ import annotations

from collections import OrderedDict

import numpy as np
import pytest

from fun.errors import InvocationError
from fun.sequences import array_every, arrayEvery, flat_map, flatMap


def test_flat_map_splices_list_results() -> None:
    assert flat_map(lambda v: [v, v * 10], [1, 2, 3]) == [1, 10, 2, 20, 3, 30]


def test_flat_map_wraps_scalar_results() -> None:
    assert flat_map(lambda v: v * 2, [1, 2, 3]) == [2, 4, 6]


def test_flat_map_flattens_one_level_only() -> None:
    result = flat_map(lambda v: [v, [v, [v]]], [1, 2])
    assert result == [1, [1, [1]], 2, [2, [2]]]


def test_flat_map_keeps_strings_and_mappings_whole() -> None:
    result = flat_map(lambda v: v, ["ab", b"cd", {"k": 1}, (1, 2)])
    assert result == ["ab", b"cd", {"k": 1}, 1, 2]


def test_flat_map_passes_index_on_request() -> None:
    result = flat_map(lambda v, i: (i, v), ["x", "y"], with_index=True)
    assert result == [0, "x", 1, "y"]


def test_flat_map_calls_fn_once_per_item_in_order() -> None:
    seen = []

    def record(v):
        seen.append(v)
        return []

    assert flat_map(record, iter([3, 1, 2])) == []
    assert seen == [3, 1, 2]


def test_flat_map_splits_numpy_arrays_along_first_axis() -> None:
    result = flat_map(lambda v: np.full((2, 2), v), [1, 2])

    assert len(result) == 4
    np.testing.assert_array_equal(result[0], np.array([1, 1]))
    np.testing.assert_array_equal(result[3], np.array([2, 2]))


def test_flat_map_keeps_zero_dimensional_arrays() -> None:
    result = flat_map(lambda v: np.float64(v) * 0.5, [2, 4])
    np.testing.assert_allclose(result, [1.0, 2.0])


def test_array_every_true_when_all_pass() -> None:
    assert array_every([1, 2, 3], lambda v, k: v == k + 1)


def test_array_every_short_circuits_on_first_failure() -> None:
    calls = []

    def check(value, key):
        calls.append(key)
        return value < 3

    assert array_every([1, 2, 5, 0, 1], check) is False
    assert calls == [0, 1, 2]


def test_array_every_call_count_equals_length_when_all_pass() -> None:
    calls = []

    def check(value, key):
        calls.append(value)
        return True

    assert array_every(range(4), check) is True
    assert len(calls) == 4


def test_array_every_empty_is_vacuously_true() -> None:
    def never(value, key):  # pragma: no cover - must not run
        raise AssertionError("predicate should not be called")

    assert array_every([], never) is True
    assert array_every({}, never) is True


def test_array_every_passes_mapping_keys_in_insertion_order() -> None:
    items = OrderedDict([("b", 2), ("a", 1)])
    seen = []

    def check(value, key):
        seen.append((key, value))
        return True

    assert array_every(items, check)
    assert seen == [("b", 2), ("a", 1)]


def test_array_every_treats_truthiness_as_pass() -> None:
    assert array_every(["x", [0]], lambda v, k: v)
    assert not array_every(["x", ""], lambda v, k: v)


def test_camel_case_aliases() -> None:
    assert flatMap is flat_map
    assert arrayEvery is array_every


def test_flat_map_accepts_string_reference() -> None:
    assert flat_map("builtins:abs", [-1, 2, -3]) == [1, 2, 3]


def test_array_every_accepts_string_reference() -> None:
    assert array_every([0, 1, 2], "operator:eq")
    assert not array_every([0, 5, 2], "operator:eq")


def test_string_reference_must_name_a_callable() -> None:
    with pytest.raises(InvocationError):
        flat_map("math:pi", [1])
    with pytest.raises(InvocationError):
        array_every([1], "math:pi")
