import json
import logging

import pytest

from torpedo.store import JsonScoreStore, MemoryScoreStore


def test_missing_file_loads_zero(tmp_path):
    assert JsonScoreStore(tmp_path / "best.json").load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "best.json"
    store = JsonScoreStore(path)
    store.save(12)
    assert json.loads(path.read_text()) == {"bestScore": 12}
    assert JsonScoreStore(path).load() == 12


def test_corrupt_file_loads_zero(tmp_path, caplog):
    path = tmp_path / "best.json"
    path.write_text("not json")
    with caplog.at_level(logging.WARNING):
        assert JsonScoreStore(path).load() == 0
    assert "Could not read" in caplog.text


def test_unwritable_path_is_a_noop(tmp_path, caplog):
    # a directory cannot be written as a file
    store = JsonScoreStore(tmp_path)
    with caplog.at_level(logging.WARNING):
        store.save(5)
        assert store.load() == 0
    assert "Could not write" in caplog.text


def test_memory_store():
    store = MemoryScoreStore(3)
    assert store.load() == 3
    store.save(9)
    assert store.load() == 9


@pytest.mark.parametrize("raw", ['{"bestScore": Infinity}', '{"bestScore": 1e999}'])
def test_non_finite_score_loads_zero(tmp_path, caplog, raw):
    path = tmp_path / "best.json"
    path.write_text(raw)
    with caplog.at_level(logging.WARNING):
        assert JsonScoreStore(path).load() == 0
    assert "Could not read" in caplog.text
