"""Tests for chronology lookup and identity."""

import copy
import pickle

import pytest

from chronofield import COPTIC, ISO, ChronologyId, all_chronologies, get_chronology


@pytest.mark.parametrize("name", ["Coptic", "coptic", "COPTIC", ChronologyId.COPTIC])
def test_lookup(name):
    assert get_chronology(name) is COPTIC


def test_unknown_chronology():
    with pytest.raises(KeyError):
        get_chronology("Julian")


def test_all_chronologies():
    assert {chronology.id for chronology in all_chronologies()} == set(ChronologyId)


def test_pickle_yields_singleton(chronology):
    assert pickle.loads(pickle.dumps(chronology)) is chronology
    assert copy.copy(chronology) is chronology


def test_equality_by_identity():
    assert ISO != COPTIC
    assert ISO == get_chronology("ISO")
