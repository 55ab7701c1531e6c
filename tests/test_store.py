import pytest

from hmm_tagger.errors import MissingProbabilityError, ModelLoadError
from hmm_tagger.model.loader import ModelTables
from hmm_tagger.model.store import ProbabilityStore


def test_tag_set_derived_from_transition_sources(toy_tables):
    store = ProbabilityStore.from_tables(toy_tables)
    assert store.tags == ("DT", "NN", "VB")
    assert store.start_symbol == "<s>"


def test_lookups(toy_tables):
    store = ProbabilityStore.from_tables(toy_tables)
    assert store.transition_prob("<s>", "DT") == 0.6
    assert store.transition_prob("NN", "VB") == 0.5
    assert store.emission_prob("NN", "fox") == 0.5
    assert store.emission_prob("DT", "dog") == 0.0
    assert store.is_known("fox")
    assert not store.is_known("zebra")


def test_missing_outer_and_inner_keys_fail_alike():
    tables = ModelTables(
        transitions=[("<s>", "NN", 1.0), ("NN", "NN", 1.0), ("VB", "NN", 1.0)],
        emissions=[("NN", "dog", 1.0)],
        vocabulary=["dog"],
    )
    store = ProbabilityStore.from_tables(tables)
    for call in (
        lambda: store.transition_prob("NN", "VB"),    # inner key absent
        lambda: store.transition_prob("JJ", "NN"),    # outer key absent
        lambda: store.emission_prob("VB", "dog"),     # outer key absent
        lambda: store.emission_prob("NN", "cat"),     # inner key absent
    ):
        with pytest.raises(MissingProbabilityError) as info:
            call()
        assert isinstance(info.value, LookupError)


def test_missing_entry_is_not_zero():
    tables = ModelTables([("<s>", "NN", 1.0), ("NN", "NN", 0.0)], [("NN", "dog", 1.0)], ["dog"])
    store = ProbabilityStore.from_tables(tables)
    assert store.transition_prob("NN", "NN") == 0.0
    with pytest.raises(MissingProbabilityError):
        store.emission_prob("NN", "cat")


def test_explicit_tag_set_order(toy_tables):
    store = ProbabilityStore.from_tables(toy_tables, tag_set=("VB", "NN", "DT"))
    assert store.tags == ("VB", "NN", "DT")
    assert store.transition_prob("DT", "NN") == 0.8


def test_tag_outside_tag_set_rejected(toy_tables):
    with pytest.raises(ModelLoadError):
        ProbabilityStore.from_tables(toy_tables, tag_set=("DT", "NN"))


def test_start_symbol_cannot_be_target_or_emitter():
    with pytest.raises(ModelLoadError):
        ProbabilityStore.from_tables(ModelTables([("NN", "<s>", 1.0)], [], []))
    with pytest.raises(ModelLoadError):
        ProbabilityStore.from_tables(ModelTables([("<s>", "NN", 1.0)], [("<s>", "dog", 1.0)], []))


def test_empty_tag_set_rejected():
    with pytest.raises(ModelLoadError):
        ProbabilityStore.from_tables(ModelTables([], [], []))


def test_store_is_read_only(toy_tables):
    store = ProbabilityStore.from_tables(toy_tables)
    with pytest.raises(ValueError):
        store.transition_matrix[0, 0] = 1.0
    assert isinstance(store.vocabulary, frozenset)


def test_end_of_sentence_column_is_skipped():
    tables = ModelTables(
        transitions=[("<s>", "NN", 1.0), ("NN", "NN", 0.9), ("NN", "</s>", 0.1)],
        emissions=[("NN", "dog", 1.0)],
        vocabulary=["dog"],
    )
    store = ProbabilityStore.from_tables(tables)
    assert store.tags == ("NN",)
    assert store.transition_prob("NN", "NN") == 0.9
    with pytest.raises(MissingProbabilityError):
        store.transition_prob("NN", "</s>")
