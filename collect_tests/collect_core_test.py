import numpy as np
import suite
from collect import C, Collect, from_pairs, InvalidKey, InvalidInput, InvalidRange, ContractViolation

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


def counting(values, pulled):
    """collection over values that records every pull from its source"""
    def produce():
        for value in values:
            pulled.append(value)
            yield value
    return Collect(produce)


# append() tests

@test("append adds a positional pair")
def test_append_basic():
    assert_that(C([1, 2, 3]).append(4).to_array() == {0: 1, 1: 2, 2: 3, 3: 4}, "append without key failed")
    assert_that(C([1, 2, 3]).append(4, None).to_array() == {0: 1, 1: 2, 2: 3, 3: 4}, "explicit None key failed")


@test("append with an explicit key")
def test_append_with_key():
    result = C([1, 2, 3]).append(4, 'key').to_array()
    assert_that(result == {0: 1, 1: 2, 2: 3, 'key': 4}, f"append with key failed: {result}")


@test("append continues after the largest integer key")
def test_append_index_continues():
    assert_that(C({'a': 1}).append(2).to_array() == {'a': 1, 0: 2}, "no integer keys should start at 0")
    assert_that(from_pairs([(5, 'a'), (2, 'b')]).append('c').to_array() == {5: 'a', 2: 'b', 6: 'c'},
                "should continue after the largest key")
    gapped = C([1, 'x', 3]).filter_numeric().append(4).to_array()
    assert_that(gapped == {0: 1, 2: 3, 3: 4}, f"gaps should be kept: {gapped}")


@test("append rejects non-scalar keys eagerly")
def test_append_invalid_key():
    for bad in (object(), [1], {'a': 1}, (1, 2)):
        with raises(InvalidKey, "not scalar"):
            C([1, 2, 3]).append(4, bad)
    for good in ('k', 7, 2.5, True):
        C([1]).append(4, good)
    result = C([1, 2]).append(5, np.int64(3)).to_array()
    assert_that(result == {0: 1, 1: 2, 3: 5}, f"numpy integer key failed: {result}")


# prepend() tests

@test("prepend with a key goes first")
def test_prepend_with_key():
    pairs = C([1, 2, 3]).prepend(0, 'zero').to.pairs()
    assert_that(pairs == [('zero', 0), (0, 1), (1, 2), (2, 3)], f"prepend with key failed: {pairs}")


@test("prepend without a key takes index 0 and collides on materialization")
def test_prepend_collision():
    pairs = C([1, 2, 3]).prepend(0).to.pairs()
    assert_that(pairs == [(0, 0), (0, 1), (1, 2), (2, 3)], f"prepend pairs failed: {pairs}")
    assert_that(C([1, 2, 3]).prepend(0).size() == 4, "size counts the colliding pair")
    assert_that(C([1, 2, 3]).prepend(0).to_array() == {0: 1, 1: 2, 2: 3}, "later pair wins on collision")


@test("prepend rejects non-scalar keys")
def test_prepend_invalid_key():
    with raises(InvalidKey):
        C([1]).prepend(0, object())


# concat() tests

@test("concat renumbers positional items")
def test_concat_positional():
    expected = {0: 1, 1: 2, 2: 3, 3: 4, 4: 5, 5: 6}
    assert_that(C([1, 2, 3]).concat([4, 5, 6]).to_array() == expected, "concat list failed")
    assert_that(C([1, 2, 3]).concat(C([4, 5, 6])).to_array() == expected, "concat collection failed")
    assert_that(C([1, 2, 3]).concat(iter([4, 5, 6])).to_array() == expected, "concat iterator failed")
    assert_that(C([1, 2, 3]).concat(np.array([4, 5, 6])).to_array() == expected, "concat ndarray failed")


@test("concat accepts any iterable")
def test_concat_iterable():
    class Shelf:
        def __iter__(self):
            return iter(["x", "y"])
    result = C([1]).concat(Shelf()).to_array()
    assert_that(result == {0: 1, 1: "x", 2: "y"}, f"concat iterable failed: {result}")
    views = C([1]).concat({"a": 2, "b": 3}.values()).to_array()
    assert_that(views == {0: 1, 1: 2, 2: 3}, f"concat dict view failed: {views}")


@test("concat passes keyed items through")
def test_concat_keyed():
    result = C([1, 2]).concat({'a': 3}).to_array()
    assert_that(result == {0: 1, 1: 2, 'a': 3}, f"concat dict failed: {result}")


@test("concat does not deduplicate colliding keys")
def test_concat_collision():
    combined = C({'a': 1}).concat({'a': 2})
    assert_that(combined.to.pairs() == [('a', 1), ('a', 2)], "both pairs should be emitted")
    assert_that(C({'a': 1}).concat({'a': 2}).to_array() == {'a': 2}, "last pair wins when materialized")


@test("concat rejects items that are not iterable")
def test_concat_invalid():
    for bad in (42, 'abc', None, lambda: (x for x in [1])):
        with raises(InvalidInput, "not iterable"):
            C([1, 2, 3]).concat(bad)


@test("concat does not pull the second source early")
def test_concat_lazy():
    pulled = []
    combined = C([1]).concat(counting([2, 3], pulled))
    assert_that(pulled == [], "second source untouched until drained")
    assert_that(combined.to.list() == [1, 2, 3], "concat values failed")


# filter() tests

@test("filter drops the pairs the predicate matches")
def test_filter_inverted():
    result = C([1, 2, 3, 4]).filter(lambda v, k: v % 2 == 0).to_array()
    assert_that(result == {0: 1, 2: 3}, f"filter should keep falsy matches only: {result}")


@test("filter passes value then key")
def test_filter_receives_key():
    result = C({'a': 1, 'b': 2, 'c': 3}).filter(lambda v, k: k == 'b').to_array()
    assert_that(result == {'a': 1, 'c': 3}, f"filter by key failed: {result}")


@test("filter keeps exactly the falsy pairs")
def test_filter_subset():
    data = {'w': 0, 'x': '', 'y': None, 'z': 5}
    result = C(data).filter(lambda v, k: v).to_array()
    assert_that(result == {'w': 0, 'x': '', 'y': None}, f"falsy subset failed: {result}")


# filter_numeric() tests

@test("filter_numeric keeps numbers with their keys")
def test_filter_numeric():
    result = C([1, 2, 'x', 3]).filter_numeric().to_array()
    assert_that(result == {0: 1, 1: 2, 3: 3}, f"filter_numeric failed: {result}")


@test("filter_numeric drops bools, None and numeric strings")
def test_filter_numeric_types():
    values = C([1, True, None, '3', 2.5, np.float64(1.5), np.int32(4), [1]]).filter_numeric().to.list()
    assert_that(values == [1, 2.5, 1.5, 4], f"numeric type filter failed: {values}")


# map() tests

@test("map transforms values and keeps keys")
def test_map_basic():
    result = C({'a': 1, 'b': 2}).map(lambda v, k: f"{k}{v}").to_array()
    assert_that(result == {'a': 'a1', 'b': 'b2'}, f"map failed: {result}")


@test("map composes")
def test_map_composition():
    f = lambda v, k: v + 1
    g = lambda v, k: v * k
    chained = C(range(5)).map(f).map(g).to_array()
    composed = C(range(5)).map(lambda v, k: g(f(v, k), k)).to_array()
    assert_that(chained == composed, f"composition mismatch: {chained} vs {composed}")


@test("map does not call the transform until drained")
def test_map_lazy():
    calls = []
    mapped = C([1, 2]).map(lambda v, k: calls.append(v) or v)
    assert_that(calls == [], "transform should not run yet")
    mapped.size()
    assert_that(calls == [1, 2], f"transform should run once per pair: {calls}")


# flip() and keys() tests

@test("flip swaps keys and values")
def test_flip_basic():
    result = C({'a': 1, 'b': 2}).flip().to_array()
    assert_that(result == {1: 'a', 2: 'b'}, f"flip failed: {result}")


@test("flip collisions keep the later pair")
def test_flip_collision():
    assert_that(C({'a': 1, 'b': 1}).flip().to.pairs() == [(1, 'a'), (1, 'b')], "flip should not deduplicate")
    assert_that(C({'a': 1, 'b': 1}).flip().to_array() == {1: 'b'}, "later pair wins")


@test("keys become re-indexed values")
def test_keys():
    result = C({'x': 10, 'y': 20}).keys().to_array()
    assert_that(result == {0: 'x', 1: 'y'}, f"keys failed: {result}")


# replace() tests

@test("replace swaps strictly equal values")
def test_replace_basic():
    result = C(['a', 'b', 'a']).replace('a', 'z').to.list()
    assert_that(result == ['z', 'b', 'z'], f"replace failed: {result}")


@test("replace compares strictly whatever the flag says")
def test_replace_always_strict():
    data = [1, 1.0, True, 2]
    expected = ['one', 1.0, True, 2]
    assert_that(C(data).replace(1, 'one').to.list() == expected, "default should compare strictly")
    assert_that(C(data).replace(1, 'one', strict=False).to.list() == expected, "strict=False still strict")
    assert_that(C(data).replace(1, 'one', strict=True).to.list() == expected, "strict=True is strict")


@test("replace re-indexes the pairs")
def test_replace_reindexes():
    result = C({'a': 1, 'b': 2}).replace(2, 'two').to_array()
    assert_that(result == {0: 1, 1: 'two'}, f"replace keys failed: {result}")


# slice(), take() and limit() tests

@test("slice selects by traversal position")
def test_slice_basic():
    assert_that(C(range(10)).slice(2, 5).to_array() == {2: 2, 3: 3, 4: 4}, "slice should keep original keys")
    assert_that(C({'a': 1, 'b': 2, 'c': 3}).slice(1, 2).to_array() == {'b': 2}, "slice over keyed data failed")
    assert_that(C(range(10)).slice(3, 3).is_empty(), "empty range should be empty")
    assert_that(C(range(10)).slice(8, 20).to_array() == {8: 8, 9: 9}, "end past the data should clip")


@test("slice size matches the clipped range")
def test_slice_size_property():
    for size in (0, 3, 7):
        for start, end in ((0, 0), (0, 2), (1, 5), (4, 10)):
            actual = C(range(size)).slice(start, end).size()
            expected = max(0, min(end, size) - start)
            assert_that(actual == expected, f"slice({start}, {end}) of {size}: {actual} != {expected}")


@test("slice stops pulling at the end position")
def test_slice_early_stop():
    pulled = []
    result = counting(range(100), pulled).slice(1, 3).to.list()
    assert_that(result == [1, 2], f"slice values failed: {result}")
    assert_that(pulled == [0, 1, 2], f"slice should not over-pull: {pulled}")

    pulled = []
    counting(range(100), pulled).take(0).to_array()
    assert_that(pulled == [], "take(0) should pull nothing")


@test("slice rejects invalid ranges eagerly")
def test_slice_invalid():
    with raises(InvalidRange, "start"):
        C([1]).slice(-1, 2)
    with raises(InvalidRange, "end"):
        C([1]).slice(3, 2)
    with raises(InvalidRange):
        C([1]).slice(1.0, 2)
    with raises(InvalidRange):
        C([1]).slice(0, '2')
    with raises(ValueError):
        C([1]).slice(0, True)


@test("take and limit are slices from zero")
def test_take_and_limit():
    assert_that(C([5, 6, 7]).take(2).to_array() == {0: 5, 1: 6}, "take failed")
    assert_that(C([5, 6, 7]).limit(2).to_array() == {0: 5, 1: 6}, "limit failed")
    assert_that(C([5, 6, 7]).take(10).size() == 3, "take past the end should clip")
    for bad in (-1, 1.5, None):
        with raises(InvalidRange):
            C([1]).take(bad)
        with raises(InvalidRange):
            C([1]).limit(bad)


# apply() and apply_flattening() tests

@test("apply runs a reusable chain")
def test_apply():
    doubled_numbers = lambda c: c.filter_numeric().map(lambda v, k: v * 2)
    result = C([1, 'x', 3]).apply(doubled_numbers).to_array()
    assert_that(result == {0: 2, 2: 6}, f"apply failed: {result}")


@test("apply requires a collection back")
def test_apply_contract():
    with raises(ContractViolation, "expected a Collect"):
        C([1]).apply(lambda c: c.to_array())
    with raises(TypeError):
        C([1]).apply(lambda c: None)


@test("apply_flattening returns whatever the callback returns")
def test_apply_flattening():
    total = C([1, 2, 3]).apply_flattening(lambda c: c.sum())
    assert_that(total == 6, f"apply_flattening failed: {total}")


if __name__ == "__main__":
    suite.run(title="collect lazy operations test suite")
