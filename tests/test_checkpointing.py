import json
import os

import pytest

from gridsnake.core import Direction
from gridsnake.core.checkpointing import CheckpointManager


def test_save_and_load_engine(tmp_path, engine_factory):
    a = engine_factory(grid_size=7, seed=4)
    a.start()
    for d in (Direction.DOWN, Direction.DOWN, Direction.RIGHT):
        a.request_direction(d)
        a.tick()

    ckpt = CheckpointManager(str(tmp_path / "ckpt"))
    path = ckpt.save("game", {"engine": a})
    assert os.path.isfile(path)
    assert ckpt.exists("game")
    with open(path) as f:
        assert "engine" in json.load(f)

    b = engine_factory(grid_size=7, seed=123)
    ckpt.load("game", {"engine": b})
    assert b.snapshot() == a.snapshot()

def test_load_skips_unknown_components(tmp_path, engine_factory):
    a = engine_factory(grid_size=4)
    ckpt = CheckpointManager(str(tmp_path))
    ckpt.save("only_a", {"a": a})
    b = engine_factory(grid_size=4, seed=77)
    before = b.snapshot()
    ckpt.load("only_a", {"b": b})
    assert b.snapshot() == before

def test_load_returns_restored_names(tmp_path, engine_factory):
    ckpt = CheckpointManager(str(tmp_path))
    ckpt.save("two", {"a": engine_factory(), "b": engine_factory()})
    assert ckpt.load("two", {"a": engine_factory(), "c": engine_factory()}) == ["a"]

def test_tags_lists_saved_bundles(tmp_path, engine_factory):
    ckpt = CheckpointManager(str(tmp_path / "none_yet"))
    assert ckpt.tags() == []
    ckpt.save("b", {"engine": engine_factory()})
    ckpt.save("a", {"engine": engine_factory()})
    assert ckpt.tags() == ["a", "b"]
    # no temp files left behind
    assert sorted(os.listdir(ckpt.root_dir)) == ["a.ckpt.json", "b.ckpt.json"]

@pytest.mark.parametrize("tag", ["", "../up", "a/b"])
def test_bad_tags_rejected(tmp_path, tag):
    with pytest.raises(ValueError):
        CheckpointManager(str(tmp_path)).path_for(tag)

def test_missing_tag_raises(tmp_path, engine_factory):
    with pytest.raises(FileNotFoundError):
        CheckpointManager(str(tmp_path)).load("nope", {"engine": engine_factory()})

@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_corrupt_bundle_rejected(tmp_path, engine_factory, text):
    ckpt = CheckpointManager(str(tmp_path))
    with open(ckpt.path_for("bad"), "w") as f:
        f.write(text)
    e = engine_factory()
    before = e.snapshot()
    with pytest.raises(ValueError):
        ckpt.load("bad", {"engine": e})
    assert e.snapshot() == before
