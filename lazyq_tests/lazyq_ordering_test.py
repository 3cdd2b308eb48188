import numpy as np
import suite
from dgen import from_schema, choice
from lazyq import Q, empty, quick_sort, sort_by, natural_order

test = suite.test
assert_that = suite.assert_that

product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': choice(['electronics', 'books', 'clothing'])
}


def _non_decreasing(values, compare=natural_order):
    return all(compare(a, b) <= 0 for a, b in zip(values, values[1:]))


# --- quick_sort ---

@test("quick_sort sorts a buffer in place")
def test_quick_sort_in_place():
    buffer = [5, 3, 8, 1, 9, 2]
    result = quick_sort(buffer)
    assert_that(result is buffer, "should return the same list object")
    assert_that(buffer == [1, 2, 3, 5, 8, 9], "buffer should be sorted")


@test("quick_sort handles trivial ranges")
def test_quick_sort_trivial():
    assert_that(quick_sort([]) == [], "empty buffer should stay empty")
    assert_that(quick_sort([4]) == [4], "single element should stay put")
    assert_that(quick_sort([2, 2, 2]) == [2, 2, 2], "all-equal buffer should be unchanged")


@test("quick_sort can sort a sub-range only")
def test_quick_sort_range():
    buffer = [5, 4, 3, 2, 1]
    quick_sort(buffer, natural_order, 1, 3)
    assert_that(buffer == [5, 2, 3, 4, 1], "only indices 1..3 should be sorted")


@test("quick_sort survives already sorted and reverse sorted input")
def test_quick_sort_degenerate_input():
    ascending = list(range(1500))
    assert_that(quick_sort(list(ascending)) == ascending, "sorted input should not exhaust the stack")
    assert_that(quick_sort(list(reversed(ascending))) == ascending, "reverse input should not exhaust the stack")


@test("quick_sort agrees with sorted() on random data")
def test_quick_sort_random():
    data = np.random.default_rng(7).integers(0, 100, 300).tolist()
    assert_that(quick_sort(list(data)) == sorted(data), "should match the builtin sort")


# --- order_by ---

@test("order_by sorts by natural order")
def test_order_by_natural():
    assert_that(Q([3, 1, 2]).order_by().to.list() == [1, 2, 3], "should sort ascending")
    assert_that(empty().order_by().to.list() == [], "empty should stay empty")


@test("order_by with key selector keeps the elements, not the keys")
def test_order_by_key():
    words = Q(['pear', 'fig', 'banana', 'kiwi'])
    result = words.order_by(len).to.list()
    assert_that([len(w) for w in result] == [3, 4, 4, 6], "should be ordered by length")
    assert_that(set(result) == {'pear', 'fig', 'banana', 'kiwi'}, "should return the original words")


@test("order_by is not stable")
def test_order_by_unstable():
    pairs = [(1, 'a'), (0, 'x'), (1, 'b'), (0, 'y')]
    result = Q(pairs).order_by(lambda p: p[0]).to.list()
    assert_that(result == [(0, 'y'), (0, 'x'), (1, 'a'), (1, 'b')],
                "equal keys 'x' and 'y' should come out swapped")


@test("order_by_descending is ascending then reversed")
def test_order_by_descending():
    assert_that(Q([3, 1, 2]).order_by_descending().to.list() == [3, 2, 1], "should sort descending")
    pairs = [(1, 'a'), (0, 'x'), (1, 'b'), (0, 'y')]
    result = Q(pairs).order_by_descending(lambda p: p[0]).to.list()
    assert_that(result == [(1, 'b'), (1, 'a'), (0, 'x'), (0, 'y')], "should be the reversed ascending order")


@test("order_by with an explicit comparer")
def test_order_by_comparer():
    reverse_order = lambda a, b: natural_order(b, a)
    assert_that(Q([1, 3, 2]).order_by(comparer=reverse_order).to.list() == [3, 2, 1],
                "comparer should define the order")
    by_length = Q(['ccc', 'a', 'bb']).order_by(comparer=lambda a, b: natural_order(len(a), len(b))).to.list()
    assert_that(by_length == ['a', 'bb', 'ccc'], "comparer over elements should work without a key")


@test("order_by preserves count and yields non-decreasing keys")
def test_order_by_properties():
    products = from_schema(product_schema, seed=555).take(60)
    ordered = products.order_by(lambda p: p['price']).to.list()
    assert_that(len(ordered) == products.to.count(), "count should be preserved")
    assert_that(_non_decreasing([p['price'] for p in ordered]), "prices should be non-decreasing")


@test("sort_by computes each key once")
def test_sort_by_key_calls():
    calls = []
    def key(x):
        calls.append(x)
        return -x
    assert_that(sort_by([1, 2, 3], key) == [3, 2, 1], "negated key should reverse")
    assert_that(sorted(calls) == [1, 2, 3], "key selector should run once per element")


if __name__ == "__main__":
    suite.main(title="lazyq ordering engine test suite")
