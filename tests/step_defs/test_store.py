"""
Step definitions for the store feature.

These tests verify the read/write contract of KindStore:
- values round-trip verbatim
- each stored value is tagged numeric or textual
- absent keys read as None / Kind.UNKNOWN
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from kindstore import Kind, init_store

# Load scenarios from feature file
scenarios("../features/store.feature")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def test_context():
    """Shared context for passing data between steps."""
    return {"store": None, "writes": []}


# =============================================================================
# Given Steps
# =============================================================================


@given("an empty store")
def empty_store(test_context):
    test_context["store"] = init_store()


@given("a write hook is registered")
def register_write_hook(test_context):
    def hook(key, entry):
        test_context["writes"].append((key, entry))

    test_context["store"].add_write_hook(hook)


# =============================================================================
# When Steps
# =============================================================================


@when(parsers.parse('I set "{key}" to "{value}"'))
def set_value(test_context, key: str, value: str):
    test_context["store"].set(key, value)


@when(parsers.parse('I set "{key}" to an empty value'))
def set_empty_value(test_context, key: str):
    test_context["store"].set(key, "")


# =============================================================================
# Then Steps
# =============================================================================


@then(parsers.parse('getting "{key}" returns "{value}"'))
def check_get(test_context, key: str, value: str):
    assert test_context["store"].get(key) == value


@then(parsers.parse('getting "{key}" returns an empty value'))
def check_get_empty(test_context, key: str):
    result = test_context["store"].get(key)
    assert result is not None
    assert result == ""


@then(parsers.parse('getting "{key}" returns nothing'))
def check_get_missing(test_context, key: str):
    assert test_context["store"].get(key) is None


@then(parsers.parse('the kind of "{key}" is {kind}'))
def check_kind(test_context, key: str, kind: str):
    assert test_context["store"].get_kind(key) is Kind(kind)


@then(parsers.parse("the store holds {count:d} entry"))
def check_len(test_context, count: int):
    assert len(test_context["store"]) == count


@then(parsers.parse("the write hook saw {count:d} writes"))
def check_hook_count(test_context, count: int):
    assert len(test_context["writes"]) == count


@then(parsers.parse('the last write seen was "{key}" as {kind}'))
def check_last_write(test_context, key: str, kind: str):
    last_key, last_entry = test_context["writes"][-1]
    assert last_key == key
    assert last_entry.kind is Kind(kind)
