# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
import pytest

## ===== LOCAL ===== ##
from fluentcheck import that, ReflectionCheck
from fluentcheck.error_utils import FluentCheckError, FailureCause

# ===== MOCKS ===== #

class Order:
    def __init__(self, reference, amount, created_at=None, customer=None):
        self.reference = reference
        self.amount = amount
        self.created_at = created_at
        self.customer = customer
        self._cache = {}

class Customer:
    def __init__(self, name=None, email=None):
        self.name = name
        self.email = email

class Invoice:
    """Unrelated to Order but sharing some of its members."""
    def __init__(self, reference, amount):
        self.reference = reference
        self.amount = amount

# ===== EQUALITY ===== #

def test_equal_with_exclusions():
    actual = Order('A1', 10, created_at='monday')
    expected = Order('A1', 10, created_at='tuesday')
    with pytest.raises(FluentCheckError, match="member 'created_at'"):
        that(actual).considering().is_equal_to(expected)
    that(actual).considering().excluding('created_at').is_equal_to(expected)
    that(actual).considering(excluding=('created_at',)).is_equal_to(expected)

def test_private_members():
    actual, expected = Order('A1', 10), Order('A1', 10)
    actual._cache['hit'] = 1
    that(actual).considering().is_equal_to(expected)
    with pytest.raises(FluentCheckError, match="member '_cache.hit'"):
        that(actual).considering(private=True).is_equal_to(expected)

def test_duck_typing_across_types():
    order = Order('A1', 10)
    with pytest.raises(FluentCheckError) as excinfo:
        that(order).considering().is_equal_to(Invoice('A1', 10))
    assert excinfo.value.cause is FailureCause.TYPE_MISMATCH
    that(order).considering(duck_typing=True).is_equal_to(Invoice('A1', 10))
    with pytest.raises(FluentCheckError, match="member 'amount'"):
        that(order).considering(duck_typing=True).is_equal_to(Invoice('A1', 11))

def test_equal_negated():
    that(Order('A1', 10)).not_.considering().is_equal_to(Order('A1', 11))
    with pytest.raises(FluentCheckError, match="is equal to the expected value whereas it must not"):
        that(Order('A1', 10)).not_.considering().is_equal_to(Order('A1', 10))

def test_nested_member_message():
    actual = Order('A1', 10, customer=Customer('ann', 'a@x'))
    expected = Order('A1', 10, customer=Customer('ann', 'b@x'))
    with pytest.raises(FluentCheckError) as excinfo:
        that(actual, 'order').considering().is_equal_to(expected)
    lines = str(excinfo.value).splitlines()
    assert lines[0] == "The checked order's member 'customer.email' is different from the expected value's member 'customer.email'."
    assert lines[2] == "\t['a@x']"
    assert lines[4] == "\t['b@x']"
    assert excinfo.value.mismatch.path == ('customer', 'email')

# ===== MEMBERSHIP ===== #

def test_is_one_of():
    order = Order('A1', 10)
    that(order).considering().is_one_of(Order('B2', 3), Order('A1', 10))
    with pytest.raises(FluentCheckError) as excinfo:
        that(order).considering().is_one_of(Order('B2', 3), Order('C3', 7))
    assert excinfo.value.cause is FailureCause.MEMBERSHIP_MISMATCH
    text = str(excinfo.value)
    assert "The expected value(s): one of" in text
    assert "(2 items)" in text

def test_is_one_of_negated():
    that(Order('A1', 10)).considering().not_.is_one_of(Order('B2', 3))
    with pytest.raises(FluentCheckError):
        that(Order('A1', 10)).considering().not_.is_one_of(Order('A1', 10))

# ===== NULL SCANS ===== #

def test_is_null_members():
    that(Customer()).considering().is_null()
    with pytest.raises(FluentCheckError) as excinfo:
        that(Customer(name='ann')).considering().is_null()
    lines = str(excinfo.value).splitlines()
    assert lines[0] == "The checked value's member 'name' has a non null member, whereas it should not."
    assert lines[2] == "\t['ann']"

def test_is_null_on_null_value():
    that(None).considering().is_null()

def test_is_null_descends_with_depth():
    order = Order(None, None, customer=Customer())
    with pytest.raises(FluentCheckError, match="member 'customer'"):
        that(order).considering().is_null()
    that(order).considering().is_null(max_depth=1)

def test_is_null_negated():
    that(Customer(email='x')).considering().not_.is_null()
    with pytest.raises(FluentCheckError, match="has only null members"):
        that(Customer()).considering().not_.is_null()

def test_is_not_null_members():
    that(Customer('ann', 'a@x')).considering().is_not_null()
    with pytest.raises(FluentCheckError) as excinfo:
        that(Customer('ann')).considering().is_not_null()
    assert str(excinfo.value).splitlines()[0] == "The checked value's member 'email' is null, whereas it should not."

def test_is_not_null_depth():
    order = Order('A1', 10, created_at='now', customer=Customer('ann'))
    that(order).considering().is_not_null()
    with pytest.raises(FluentCheckError, match="member 'customer.email'"):
        that(order).considering().is_not_null(max_depth=1)

def test_is_not_null_on_null_value():
    with pytest.raises(FluentCheckError) as excinfo:
        that(None).considering().is_not_null()
    assert excinfo.value.cause is FailureCause.NULL_SUT

def test_is_not_null_negated():
    that(Customer('ann')).considering().not_.is_not_null()
    with pytest.raises(FluentCheckError, match="has no null member"):
        that(Customer('ann', 'a@x')).considering().not_.is_not_null()

# ===== CONTEXT ===== #

def test_excluding_keeps_context():
    check = that(Order('A1', 1), 'order').not_.considering().excluding('amount')
    assert isinstance(check, ReflectionCheck)
    assert check.negated is True
    assert check.label == "checked order"
    assert 'amount' in check.criteria.excluded

def test_chaining_after_reflection_check():
    that(Customer('ann', 'a@x')).considering().is_not_null().and_.is_equal_to(Customer('ann', 'a@x'))
