import numpy as np
import pandas as pd
import suite
from dgen import from_schema, choice
from lazyq import (Q, from_iterable, from_range, repeat, empty, generate, lazyq, Enumerable,
                   natural_order, EmptySequenceError, CardinalityError, LazyqError)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

row_schema = {
    'sku': 'ean8',
    'qty': ('pyint', {'min_value': 1, 'max_value': 9}),
    'bin': choice(['a1', 'b2']),
}


# --- factories ---

@test("factory functions create enumerables")
def test_factories():
    assert_that(isinstance(from_iterable([1]), Enumerable), "from_iterable should build an enumerable")
    assert_that(lazyq is from_iterable and Q is from_iterable, "aliases should point at from_iterable")
    assert_that(from_range(10, 3).to.list() == [10, 11, 12], "from_range should count up")
    assert_that(repeat('a', 3).to.list() == ['a', 'a', 'a'], "repeat should repeat")
    assert_that(empty().to.list() == [], "empty should be empty")
    assert_that(generate(lambda: 'x', 2).to.list() == ['x', 'x'], "generate should call the function")


# --- first / last ---

@test("first raises on empty input, first_or_default does not")
def test_first():
    assert_that(Q([4, 5]).to.first() == 4, "first should be 4")
    assert_that(Q([4, 5, 6]).to.first(lambda x: x > 4) == 5, "first match should be 5")
    assert_raises(EmptySequenceError, empty().to.first)
    assert_raises(EmptySequenceError, lambda: Q([1]).to.first(lambda x: x > 1))
    assert_that(empty().to.first_or_default() is None, "default should be None")
    assert_that(empty().to.first_or_default(default=0) == 0, "caller default should be returned")


@test("first stops reading an unbounded source")
def test_first_short_circuit():
    assert_that(generate(lambda: 7).to.first() == 7, "should not need the whole source")


@test("last returns the final qualifying element")
def test_last():
    assert_that(Q([1, 2, 3]).to.last() == 3, "last should be 3")
    assert_that(Q([1, 2, 3]).to.last(lambda x: x < 3) == 2, "last match should be 2")
    assert_that(Q([None]).to.last() is None, "a None element is still an element")
    assert_raises(EmptySequenceError, empty().to.last)
    assert_that(Q([1]).to.last_or_default(lambda x: x > 5, default=-1) == -1, "default on no match")


# --- single ---

@test("single requires exactly one element")
def test_single():
    assert_that(Q([5]).to.single() == 5, "single element should be returned")
    assert_that(Q([1, 2, 3]).to.single(lambda x: x == 2) == 2, "single match should be returned")
    assert_raises(CardinalityError, empty().to.single)
    error = assert_raises(CardinalityError, Q([1, 2]).to.single)
    assert_that(isinstance(error, LazyqError), "all errors share a base class")


@test("single_or_default never raises")
def test_single_or_default():
    assert_that(empty().to.single_or_default(default=0) == 0, "no elements gives the default")
    assert_that(Q([1, 2]).to.single_or_default() is None, "several elements give the default")
    assert_that(Q([1, 2]).to.single_or_default(lambda x: x == 2) == 2, "one match is returned")


# --- element_at ---

@test("element_at indexes from zero and rejects out-of-range positions")
def test_element_at():
    letters = Q(['a', 'b', 'c'])
    assert_that(letters.to.element_at(1) == 'b', "index 1 should be 'b'")
    assert_raises(EmptySequenceError, lambda: letters.to.element_at(3))
    assert_raises(EmptySequenceError, lambda: letters.to.element_at(-1))
    assert_that(letters.to.element_at_or_default(5, 'z') == 'z', "default when out of range")


# --- contains / aggregate ---

@test("contains searches linearly with optional comparer")
def test_contains():
    assert_that(Q([1, 2, 3]).to.contains(2), "2 should be found")
    assert_that(not Q([1, 2, 3]).to.contains(4), "4 should not be found")
    assert_that(Q([{'a': 1}]).to.contains({'a': 1}), "unhashable elements should work")
    ci = lambda a, b: natural_order(a.lower(), b.lower())
    assert_that(Q(['Hello']).to.contains('HELLO', comparer=ci), "comparer should decide equality")


@test("aggregate folds with or without a seed")
def test_aggregate():
    assert_that(Q([1, 2, 3]).to.aggregate(lambda a, b: a + b) == 6, "fold without seed")
    assert_that(Q([1, 2, 3]).to.aggregate(lambda a, b: a + b, 10) == 16, "fold with seed")
    assert_that(empty().to.aggregate(lambda a, b: a + b, 0) == 0, "empty with seed returns the seed")
    assert_raises(EmptySequenceError, lambda: empty().to.aggregate(lambda a, b: a + b))
    joined = Q(['a', 'b']).to.aggregate_with_selector('', lambda acc, s: acc + s, str.upper)
    assert_that(joined == 'AB', "result selector should run on the fold")
    assert_that(empty().to.aggregate_with_selector(5, lambda a, b: a + b, lambda x: x * 2) == 10,
                "empty input should pass the seed to the result selector")


# --- conversions ---

@test("conversions to python containers")
def test_python_conversions():
    data = Q([('a', 1), ('b', 2), ('a', 3)])
    assert_that(data.to.list() == [('a', 1), ('b', 2), ('a', 3)], "list should copy")
    assert_that(data.to.dict(lambda p: p[0], lambda p: p[1]) == {'a': 3, 'b': 2}, "later keys overwrite")
    assert_that(Q([1, 1, 2]).to.set() == {1, 2}, "set should deduplicate")
    first = data.to.list()
    first.append('x')
    assert_that(data.to.count() == 3, "mutating a returned list should not affect the source view")


@test("conversions to numpy and pandas")
def test_numpy_pandas_conversions():
    array = from_range(1, 4).to.array()
    assert_that(isinstance(array, np.ndarray), "array should be an ndarray")
    assert_that(array.tolist() == [1, 2, 3, 4], "array should hold the elements")

    series = Q([1.5, 2.5]).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 4.0, "series should hold the elements")

    frame = from_schema(row_schema, seed=5).take(8).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "df should be a DataFrame")
    assert_that(list(frame.columns) == ['sku', 'qty', 'bin'] and len(frame) == 8, "records become rows")


if __name__ == "__main__":
    suite.main(title="lazyq terminal operations test suite")
