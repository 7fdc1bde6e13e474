import pytest

from catalog_search.domain.products import ContextState
from catalog_search.infrastructure.context import ExecutionContext


def test_scope_sets_and_restores_currency():
    context = ExecutionContext(language_id=2, currency_id=1)

    with context.currency_scope(5) as state:
        assert state == ContextState(language_id=2, currency_id=5)
        assert context.currency_id == 5

    assert context.snapshot() == ContextState(language_id=2, currency_id=1)


def test_scope_restores_after_exception():
    context = ExecutionContext(language_id=1)

    with pytest.raises(KeyError):
        with context.currency_scope(3):
            raise KeyError("boom")

    assert context.currency_id is None


def test_nested_scopes_restore_in_reverse_order():
    context = ExecutionContext(language_id=1, currency_id=1)

    with context.currency_scope(2):
        with context.currency_scope(3):
            assert context.currency_id == 3
        assert context.currency_id == 2

    assert context.currency_id == 1


def test_snapshot_is_immutable():
    state = ExecutionContext(language_id=1, currency_id=1).snapshot()

    with pytest.raises(AttributeError):
        state.currency_id = 2
