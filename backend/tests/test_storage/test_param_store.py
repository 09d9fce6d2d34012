"""Tests for the saved-parameter JSON store."""

import json

import pytest

from app.engine.context import GenerationParams
from app.storage.param_store import SAVED_PARAMS_KEY, ParamStore
from tests.conftest import MINIMAL_RADIAL, STUDIO_DEFAULT


@pytest.fixture
def store(tmp_path):
    return ParamStore(tmp_path / "nested" / "saved.json")


def test_empty_store(store):
    assert store.load_params() == []
    assert store.get("missing", 5) == 5


def test_save_appends_and_round_trips(store):
    assert store.save_params(MINIMAL_RADIAL) == [MINIMAL_RADIAL]
    saved = store.save_params(STUDIO_DEFAULT)
    assert saved == [MINIMAL_RADIAL, STUDIO_DEFAULT]
    assert ParamStore(store.path).load_params() == saved


def test_file_layout(store):
    store.save_params(STUDIO_DEFAULT)
    data = json.loads(store.path.read_text())
    assert list(data) == [SAVED_PARAMS_KEY]
    assert data[SAVED_PARAMS_KEY][0]["selected_shapes"] == ["circle", "square"]
    assert not store.path.with_suffix(".json.tmp").exists()


def test_clear(store):
    store.save_params(STUDIO_DEFAULT)
    store.set("other", 1)
    store.clear_params()
    assert store.load_params() == []
    assert store.get("other") == 1


def test_corrupt_file_treated_as_empty(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")
    assert store.load_params() == []
    assert store.save_params(MINIMAL_RADIAL) == [MINIMAL_RADIAL]


def test_malformed_records_skipped(store):
    good = GenerationParams(grid_size=4).to_dict()
    store.set(SAVED_PARAMS_KEY, [{"grid_size": 3, "bogus": True}, good])
    assert store.load_params() == [GenerationParams(grid_size=4)]


def test_delete_by_index(store):
    store.save_params(MINIMAL_RADIAL)
    store.save_params(STUDIO_DEFAULT)
    store.save_params(GenerationParams(grid_size=4))
    assert store.delete_params(1) == [MINIMAL_RADIAL, GenerationParams(grid_size=4)]
    assert ParamStore(store.path).load_params() == [MINIMAL_RADIAL, GenerationParams(grid_size=4)]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_delete_out_of_range(store, index):
    store.save_params(MINIMAL_RADIAL)
    with pytest.raises(IndexError):
        store.delete_params(index)
    assert store.load_params() == [MINIMAL_RADIAL]


def test_delete_counts_loadable_records_only(store):
    good = GenerationParams(grid_size=4).to_dict()
    store.set(SAVED_PARAMS_KEY, [{"bogus": True}, good, MINIMAL_RADIAL.to_dict()])
    assert store.delete_params(0) == [MINIMAL_RADIAL]
    assert store.get(SAVED_PARAMS_KEY) == [MINIMAL_RADIAL.to_dict()]


@pytest.mark.parametrize("value", [{"grid_size": 3}, "oops", 7])
def test_non_list_value_treated_as_empty(store, value):
    store.set(SAVED_PARAMS_KEY, value)
    assert store.load_params() == []
    assert store.save_params(MINIMAL_RADIAL) == [MINIMAL_RADIAL]
    assert store.delete_params(0) == []
