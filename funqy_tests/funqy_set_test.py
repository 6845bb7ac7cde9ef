import suite
from dgen import from_schema
from funqy import uniq, unique, intersection, difference, zip, contains

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'word',
    'city': {'_qen_provider': 'choice', 'from': ['ny', 'la', 'chi']},
    'score': ('pyint', {'min_value': 80, 'max_value': 100})
}


# --- uniq ---

@test("uniq removes duplicates while preserving order")
def test_uniq_basic():
    result = uniq([1, 2, 1, 3, 2, 4])
    assert_that(result == [1, 2, 3, 4], "uniq should preserve first occurrence order")


@test("uniq handles empty sequences")
def test_uniq_empty():
    assert_that(uniq([]) == [], "uniq on empty should be empty")


@test("uniq with all same elements")
def test_uniq_all_same():
    assert_that(uniq([5, 5, 5, 5]) == [5], "uniq should return single element")


@test("uniq keeps values of different types apart")
def test_uniq_strict():
    result = uniq([1, 1.0, True, '1', 1])
    assert_that(result == [1, 1.0, True, '1'], f"got {result}")
    assert_that([type(v) for v in result] == [int, float, bool, str], "types should be preserved")


@test("uniq handles unhashable elements")
def test_uniq_unhashable():
    result = uniq([[1], {'a': 1}, [1], {'a': 1}, [2]])
    assert_that(result == [[1], {'a': 1}, [2]], f"got {result}")


@test("uniq does not mutate its input")
def test_uniq_no_mutation():
    data = [3, 3, 1]
    uniq(data)
    assert_that(data == [3, 3, 1], "input should not change")


@test("uniq output has no duplicates and contains every input value")
def test_uniq_properties():
    people = from_schema(person_schema, seed=42).take(30)
    cities = [p['city'] for p in people]
    distinct = uniq(cities)
    assert_that(len(distinct) == len(set(cities)), "one entry per city")
    assert_that(all(contains(distinct, city) for city in cities), "every city is kept")
    assert_that(distinct == list(dict.fromkeys(cities)), "first-seen order")


@test("unique is an alias of uniq")
def test_unique_alias():
    assert_that(unique('abca') == ['a', 'b', 'c'], "alias should dedupe characters")


# --- intersection ---

@test("intersection keeps shared elements in first-sequence order")
def test_intersection_basic():
    assert_that(intersection([1, 2, 3], [2, 3, 4]) == [2, 3], "should be [2, 3]")
    assert_that(intersection([3, 2, 1], [1, 2]) == [2, 1], "order comes from the first sequence")


@test("intersection across several sequences")
def test_intersection_many():
    result = intersection([1, 2, 3, 4], [2, 3, 4, 5], [3, 4, 6])
    assert_that(result == [3, 4], f"got {result}")


@test("intersection keeps duplicates of the first sequence")
def test_intersection_duplicates():
    assert_that(intersection([1, 1, 2], [1]) == [1, 1], "duplicates are kept")


@test("intersection with nothing shared or nothing else")
def test_intersection_edges():
    assert_that(intersection([1, 2], [3]) == [], "nothing shared")
    assert_that(intersection([1, 2]) == [1, 2], "no other sequences keeps everything")
    assert_that(intersection([], [1]) == [], "empty first sequence")


@test("intersection uses strict equality")
def test_intersection_strict():
    assert_that(intersection([1, 2], [1.0, '2']) == [], "no coercion")


# --- difference ---

@test("difference keeps elements found nowhere else")
def test_difference_basic():
    assert_that(difference([1, 2, 3], [2, 3, 4]) == [1], "should be [1]")


@test("difference across several sequences")
def test_difference_many():
    result = difference([1, 2, 3, 4, 5], [5, 2, 10], [4])
    assert_that(result == [1, 3], f"got {result}")


@test("difference keeps duplicates of the first sequence")
def test_difference_duplicates():
    assert_that(difference([1, 1, 2], [2]) == [1, 1], "duplicates are kept")


@test("difference with no other sequences keeps everything")
def test_difference_alone():
    assert_that(difference([1, 2]) == [1, 2], "nothing to subtract")


@test("difference and intersection split the first sequence")
def test_difference_intersection_split():
    people = from_schema(person_schema, seed=3).take(20)
    ids = [p['id'] for p in people]
    others = [1, 2]
    shared = intersection(ids, others)
    rest = difference(ids, others)
    assert_that(len(shared) + len(rest) == len(ids), "every id lands on one side")
    assert_that(all(i in (1, 2) for i in shared), "shared ids come from the other list")
    assert_that(all(i not in (1, 2) for i in rest), "remaining ids are not in the other list")


# --- zip ---

@test("zip pairs elements by position")
def test_zip_basic():
    result = zip(['a', 'b'], [1, 2], [True, False])
    assert_that(result == [['a', 1, True], ['b', 2, False]], f"got {result}")


@test("zip pads shorter sequences with None")
def test_zip_padding():
    result = zip(['a', 'b', 'c'], [1, 2])
    assert_that(result == [['a', 1], ['b', 2], ['c', None]], f"got {result}")


@test("zip length follows the longest sequence")
def test_zip_longest():
    result = zip([1], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    assert_that(len(result) == 10, "ten rows expected")
    assert_that(result[-1] == [None, 10], f"got {result[-1]}")


@test("zip with no or empty sequences")
def test_zip_empty():
    assert_that(zip() == [], "no inputs")
    assert_that(zip([], []) == [], "empty inputs")


if __name__ == "__main__":
    suite.main(title="funqy set operations test suite")
