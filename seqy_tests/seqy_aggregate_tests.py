import suite
from dgen import from_schema, pairs_from_schema
from seqy import Seq, KV, of, of_kv, empty, empty_kv, from_iterable

test = suite.test
assert_that = suite.assert_that

ages = {'_qen_provider': 'choice', 'from': [18, 25, 33, 41, 67]}

descending = of(9, 8, 7, 6, 5, 4, 3, 2, 1)
greetings = of('hi', 'hello', 'world')
letters = of_kv(('a', 1), ('b', 2), ('c', 3))


def by_value(a, b):
    return a.value - b.value


def by_key(a, b):
    return (a.key > b.key) - (a.key < b.key)


# min / max

@test("min and max use natural ordering")
def test_min_max():
    assert_that(descending.agg.min() == (1, True), "min should be 1")
    assert_that(descending.agg.max() == (9, True), "max should be 9")


@test("min and max of an empty sequence report not found")
def test_min_max_empty():
    assert_that(empty().agg.min() == (None, False), "empty min")
    assert_that(empty().agg.max() == (None, False), "empty max")


@test("min_func and max_func use the comparator")
def test_min_max_func():
    compare = lambda a, b: (a > b) - (a < b)
    assert_that(greetings.agg.min_func(compare) == ('hello', True), "min_func mismatch")
    assert_that(greetings.agg.max_func(compare) == ('world', True), "max_func mismatch")
    assert_that(empty().agg.min_func(compare) == (None, False), "empty min_func")


@test("ties keep the earliest element")
def test_min_max_ties():
    words = of('bb', 'aa', 'cc', 'dd')
    by_len = lambda a, b: len(a) - len(b)
    assert_that(words.agg.min_func(by_len) == ('bb', True), "min tie should keep the first")
    assert_that(words.agg.max_func(by_len) == ('bb', True), "max tie should keep the first")


@test("min_func and max_func over pairs")
def test_min_max_func_kv():
    assert_that(letters.agg.min_func(by_value) == (KV('a', 1), True), "min by value")
    assert_that(letters.agg.min_func(by_key) == (KV('a', 1), True), "min by key")
    assert_that(letters.agg.max_func(by_value) == (KV('c', 3), True), "max by value")
    # a comparator that declares any value of 3 smaller than everything
    rigged = lambda a, b: -1 if a.value == 3 else 1
    assert_that(letters.agg.min_func(rigged) == (KV('c', 3), True), "rigged min")
    assert_that(empty_kv().agg.max_func(by_value) == (None, False), "empty max_func")


# reduce / count

@test("reduce folds from the left")
def test_reduce():
    nums = of(1, 2, 3, 4, 5)
    assert_that(nums.agg.reduce(10, lambda acc, x: acc + x) == 25, "sum from 10")
    out = nums.agg.reduce('a', lambda acc, x: acc * x)
    assert_that(len(out) == 120, f"string fold length: {len(out)}")
    assert_that(empty().agg.reduce('seed', lambda acc, x: acc + x) == 'seed', "empty fold returns the seed")


@test("reduce over pairs receives key and value")
def test_reduce_kv():
    out = letters.agg.reduce('hello: ', lambda acc, k, v: acc + k + str(v))
    assert_that(out == 'hello: a1b2c3', f"unexpected fold: {out}")


@test("count and count_by")
def test_count():
    assert_that(of(1, 2, 3, 4).agg.count() == 4, "count")
    assert_that(from_iterable(range(1, 11)).agg.count_by(lambda v: v % 2 == 0) == 5, "count evens")
    assert_that(letters.agg.count() == 3, "count pairs")
    assert_that(letters.agg.count_by(lambda k, v: v % 2 == 0) == 1, "count even pairs")
    assert_that(empty().agg.count() == 0, "empty count")


@test("count_values builds a frequency table")
def test_count_values():
    table = of(1, 1, 2, 2, 3, 3, 3, 4).agg.count_values().to.dict()
    assert_that(table == {1: 2, 2: 2, 3: 3, 4: 1}, f"unexpected table: {table}")


@test("count_values consumes its input before returning")
def test_count_values_eager():
    pulled = []
    def source():
        for x in [1, 2, 1]:
            pulled.append(x)
            yield x
    table = Seq(source).agg.count_values()
    assert_that(pulled == [1, 2, 1], "input should be consumed up front")
    assert_that(table.agg.count() == 2, "two distinct values")


@test("count_values agrees with generated data")
def test_count_values_generated():
    seq = from_schema(ages, seed=3).take(200)
    table = seq.agg.count_values().to.dict()
    assert_that(sum(table.values()) == 200, "counts should add up to the length")
    for age, occurrences in table.items():
        assert_that(seq.agg.count_by(lambda a: a == age) == occurrences, f"count for {age} disagrees")


# coalesce

@test("coalesce returns the first non-zero value")
def test_coalesce():
    assert_that(of(0, 0, 4, 5).agg.coalesce() == (4, True), "should skip zeros")
    assert_that(of(0, 0).agg.coalesce() == (0, False), "all zeros is not found")
    assert_that(empty().agg.coalesce() == (None, False), "empty is not found")
    assert_that(of('', None, 'x').agg.coalesce() == ('x', True), "falsy values are zero")


@test("coalesce with an explicit zero value")
def test_coalesce_explicit_zero():
    assert_that(of(-1, -1, 0, 3).agg.coalesce(zero=-1) == (0, True), "0 is not the zero here")
    assert_that(of(-1).agg.coalesce(zero=-1) == (-1, False), "not found returns the zero")
    assert_that(empty().agg.coalesce(zero=0) == (0, False), "empty returns the zero")


@test("coalesce over pairs looks at the value")
def test_coalesce_kv():
    seq = of_kv(('a', 0), ('b', 0), ('c', 4), ('d', 5))
    assert_that(seq.agg.coalesce() == (KV('c', 4), True), "should find c")
    assert_that(of_kv(('a', 0)).agg.coalesce(zero=0) == (KV(None, 0), False), "not found")


# is_sorted

@test("is_sorted accepts equal neighbours")
def test_is_sorted():
    nums = of(1, 2, 3, 4, 5)
    assert_that(nums.agg.is_sorted(), "ascending")
    assert_that(nums.agg.is_sorted(), "still ascending on a second pass")
    assert_that(of(1, 2, 2, 3).agg.is_sorted(), "equal neighbours are sorted")
    assert_that(not of(1, 2, 3, 4, 3).agg.is_sorted(), "a drop at the end is unsorted")
    assert_that(empty().agg.is_sorted(), "empty is sorted")


@test("is_sorted on pairs checks key and value separately")
def test_is_sorted_kv():
    assert_that(letters.agg.is_sorted(), "both fields ascend")
    assert_that(of_kv(('a', 1), ('b', 2), ('b', 2), ('c', 3)).agg.is_sorted(), "repeats are fine")
    assert_that(not of_kv(('a', 1), ('b', 2), ('c', 3), ('d', 2)).agg.is_sorted(), "value drops")
    assert_that(not of_kv(('b', 1), ('a', 2), ('c', 3)).agg.is_sorted(), "key drops")
    # key ascends while the value drops: sorted by key-then-value, but not field by field
    assert_that(not of_kv(('a', 2), ('b', 1)).agg.is_sorted(), "value drop under a rising key")


@test("is_sorted on pairs does not compare the first pair to a default")
def test_is_sorted_kv_negative_start():
    assert_that(of_kv((-5, -3), (-4, -1)).agg.is_sorted(), "negative values can be sorted")


# search

@test("contains and contains_func")
def test_contains():
    nums = of(1, 2, 3)
    assert_that(nums.search.contains(2), "2 is present")
    assert_that(not nums.search.contains(7), "7 is absent")
    assert_that(nums.search.contains_func(lambda v: v > 2), "something above 2")
    assert_that(letters.search.contains('b', 2), "pair present")
    assert_that(not letters.search.contains('b', 3), "pair absent")
    assert_that(letters.search.contains_func(lambda k, v: k == 'c'), "key c present")


@test("contains short-circuits on the first match")
def test_contains_short_circuit():
    seen = []
    seq = of(1, 2, 3, 4).map(lambda v: seen.append(v) or v)
    assert_that(seq.search.contains(2), "2 is present")
    assert_that(seen == [1, 2], f"pulled too far: {seen}")


@test("find reports the length when nothing matches")
def test_find():
    nums = of(1, 2, 3, 4, 5)
    assert_that(nums.search.find(3) == (2, True), "3 is at index 2")
    assert_that(nums.search.find(6) == (5, False), "not found reports the length")
    assert_that(empty().search.find(1) == (0, False), "empty reports zero")


@test("find_by returns the element, its index and the flag")
def test_find_by():
    nums = of(1, 2, 3, 4, 5)
    assert_that(nums.search.find_by(lambda v: v == 3) == (3, 2, True), "found 3")
    assert_that(nums.search.find_by(lambda v: v == 6) == (None, 5, False), "not found")


@test("find_by_key and find_by_value")
def test_find_by_key_value():
    assert_that(letters.search.find_by_key('b') == (2, 1, True), "key b")
    assert_that(letters.search.find_by_key('d') == (None, 3, False), "missing key")
    assert_that(letters.search.find_by_value(2) == ('b', 1, True), "value 2")
    assert_that(letters.search.find_by_value(4) == (None, 3, False), "missing value")


@test("find_by_key agrees with a dict built from generated pairs")
def test_find_by_key_generated():
    pairs = pairs_from_schema('word', ('pyint', {'min_value': 0, 'max_value': 99}), 30, seed=5)
    first_seen = {}
    for k, v in pairs:
        first_seen.setdefault(k, v)
    for key, value in first_seen.items():
        found, _, ok = pairs.search.find_by_key(key)
        assert_that(ok and found == value, f"lookup of {key} disagrees")


if __name__ == "__main__":
    suite.run(title="seqy aggregation and search test suite")
