import pytest

from sokoban.assets import AssetStore


@pytest.fixture
def asset_dir(tmp_path):
    (tmp_path / "walk.wav").write_text("step")
    (tmp_path / "fail.wav").write_text("oops")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "hidden.wav").write_text("no")
    return tmp_path


def test_load_directory_uses_file_stems(asset_dir):
    store = AssetStore(lambda p: p.read_text())
    names = store.load_directory(asset_dir)
    assert sorted(names) == ["fail", "walk"]
    assert len(store) == 2
    assert "walk" in store
    assert "hidden" not in store
    assert "nested" not in store


def test_get_returns_loader_result(asset_dir):
    store = AssetStore(lambda p: p.read_text())
    store.load_directory(str(asset_dir))
    assert store.get("walk") == "step"
    assert store.get("fail") == "oops"


def test_get_missing_raises_key_error(asset_dir):
    store = AssetStore(lambda p: p.read_text())
    store.load_directory(asset_dir)
    with pytest.raises(KeyError):
        store.get("celebrate")


def test_missing_directory_loads_nothing(tmp_path):
    store = AssetStore(lambda p: p.read_text())
    assert store.load_directory(tmp_path / "absent") == []
    assert len(store) == 0