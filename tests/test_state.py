"""Tests for AppState transitions."""

import pytest

from core.models import CustomerFields
from core.state import (
    AppState, EditCancelled, EditRequested, FetchFailed, FetchStarted, FetchSucceeded,
    FieldChanged, MutationFailed, MutationStarted, MutationSucceeded, QueryChanged, reduce,
)


def test_initial_state_is_create_mode_and_loading():
    state = AppState()
    assert not state.is_editing
    assert state.form == CustomerFields.empty()
    assert state.loading is True
    assert state.filtered == []


def test_fetch_succeeded_replaces_list(alice, bob):
    state = reduce(AppState(), FetchSucceeded((alice, bob)))
    assert state.customers == (alice, bob)
    assert state.loading is False


def test_fetch_failed_keeps_previous_list(alice):
    loaded = reduce(AppState(), FetchSucceeded((alice,)))
    state = reduce(reduce(loaded, FetchStarted()), FetchFailed())
    assert state.customers == (alice,)
    assert state.loading is False


def test_query_rederives_filtered_view(alice, bob):
    state = reduce(AppState(), FetchSucceeded((alice, bob)))
    state = reduce(state, QueryChanged("ali"))
    assert state.filtered == [alice]
    state = reduce(state, QueryChanged(""))
    assert state.filtered == [alice, bob]


def test_edit_requested_copies_record_values(bob):
    state = reduce(AppState(), EditRequested(bob))
    assert state.editing == bob
    assert state.form == CustomerFields(name="Bob", shirt=bob.shirt, pants=bob.pants, phone="555-2222")


def test_edit_cancelled_returns_to_create_mode(bob):
    state = reduce(AppState(), EditRequested(bob))
    state = reduce(state, EditCancelled())
    assert state.editing is None
    assert state.form == CustomerFields.empty()


def test_field_changed_updates_one_field():
    state = reduce(AppState(), FieldChanged("shirt", "Peito 42"))
    assert state.form.shirt == "Peito 42"
    assert state.form.name == ""


def test_field_changed_rejects_unknown_field():
    with pytest.raises(ValueError):
        reduce(AppState(), FieldChanged("id", "x"))


def test_mutation_success_clears_form(bob):
    state = reduce(reduce(AppState(), FetchStarted()), FetchSucceeded((bob,)))
    state = reduce(state, EditRequested(bob))
    state = reduce(state, MutationStarted("update"))
    assert state.loading is True
    state = reduce(state, MutationSucceeded("update"))
    assert state.editing is None
    assert state.form == CustomerFields.empty()
    assert state.loading is False


def test_mutation_failure_keeps_form(bob):
    state = reduce(reduce(AppState(), FetchStarted()), FetchSucceeded((bob,)))
    state = reduce(state, EditRequested(bob))
    state = reduce(state, FieldChanged("name", "Roberto"))
    state = reduce(state, MutationStarted("update"))
    state = reduce(state, MutationFailed("update"))
    assert state.editing == bob
    assert state.form.name == "Roberto"
    assert state.loading is False


def test_reduce_does_not_mutate_previous_state(alice):
    before = AppState()
    after = reduce(before, FetchSucceeded((alice,)))
    assert before.customers == ()
    assert after is not before


def test_unknown_event_raises():
    with pytest.raises(TypeError):
        reduce(AppState(), object())


def test_loading_counts_calls_in_flight(alice):
    state = reduce(AppState(), FetchStarted())
    state = reduce(state, MutationStarted("delete"))
    assert state.pending == 2
    state = reduce(state, FetchSucceeded((alice,)))
    assert state.loading is True
    state = reduce(state, MutationFailed("delete"))
    assert state.pending == 0
    assert state.loading is False


def test_first_fetch_failure_stops_loading():
    state = reduce(reduce(AppState(), FetchStarted()), FetchFailed())
    assert state.loading is False


def test_view_key_ignores_form_edits(alice, bob):
    state = reduce(AppState(), FetchSucceeded((alice, bob)))
    key = state.view_key
    for event in (FieldChanged("name", "Ca"), EditRequested(bob), EditCancelled(), MutationStarted("create")):
        state = reduce(state, event)
        assert state.view_key == key
    assert reduce(state, QueryChanged("ali")).view_key != key
    assert reduce(state, FetchSucceeded((bob,))).view_key != key
