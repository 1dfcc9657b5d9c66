import json

import pytest

from skycast.serializer import Serializable, load, save


class Counter(Serializable):
    def __init__(self, count=0, label=""):
        self.count = count
        self.label = label
        self.loaded_from = None

    def to_dict(self):
        return {"count": self.count, "label": self.label}

    def load_dict(self, mapping):
        self.loaded_from = dict(mapping)
        self.count = mapping.get("count", 0)
        self.label = mapping.get("label", "")


def test_round_trip(tmp_path):
    path = tmp_path / "state.json"
    save(Counter(7, "Niš °C"), path)
    restored = Counter()
    load(restored, path)
    assert (restored.count, restored.label) == (7, "Niš °C")


def test_saved_file_is_indented_json(tmp_path):
    path = tmp_path / "state.json"
    save(Counter(3, "x"), str(path))
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"count": 3, "label": "x"}
    assert text.splitlines()[1].startswith("    ")


def test_missing_file_leaves_object_untouched(tmp_path):
    target = Counter(5, "keep")
    load(target, tmp_path / "absent.json")
    assert (target.count, target.label) == (5, "keep")
    assert target.loaded_from is None


def test_invalid_json_loads_empty_mapping(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    target = Counter(5, "keep")
    load(target, path)
    assert target.loaded_from == {}
    assert target.count == 0


def test_non_object_json_loads_empty_mapping(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    target = Counter(2)
    load(target, path)
    assert target.loaded_from == {}


def test_serializable_is_abstract():
    with pytest.raises(TypeError):
        Serializable()