from trigger_harness import HarnessSession, make_data_snapshot
from trigger_harness.models.snapshot import DataSnapshot, KeyedPath, PathBearing


def test_snapshot_implements_path_protocols():
    snap = DataSnapshot("v", "/a/b")
    assert isinstance(snap, PathBearing)
    assert isinstance(snap, KeyedPath)
    assert not isinstance({"path": "a/b"}, PathBearing)


def test_path_is_normalized_and_key_derived():
    snap = DataSnapshot("v", "/users/abe/")
    assert snap.get_path() == "users/abe"
    assert snap.key == "abe"

    snap.set_path("/users/lauren")
    assert snap.get_path() == "users/lauren"
    assert snap.key == "lauren"


def test_root_snapshot_has_no_key():
    assert DataSnapshot({}, "/").key is None


def test_val_returns_copy():
    value = {"name": {"first": "Abe"}}
    snap = DataSnapshot(value, "users/abe")

    snap.val()["name"]["first"] = "Changed"

    assert snap.val() == value


def test_child_and_exists():
    snap = DataSnapshot({"name": {"first": "Abe"}}, "users/abe")

    child = snap.child("name/first")
    assert child.val() == "Abe"
    assert child.key == "first"
    assert child.get_path() == "users/abe/name/first"
    assert snap.has_child("name")
    assert not snap.has_child("missing")
    assert not snap.child("name/first/deeper").exists()


def test_to_json():
    assert DataSnapshot({"a": 1}, "x").to_json() == '{"a": 1}'


def test_ref_uses_instance():
    snap = DataSnapshot(None, "/users/abe", instance="https://db.example.com/")
    assert snap.ref == "https://db.example.com/users/abe"
    assert DataSnapshot(None, "users/abe").ref == "/users/abe"


def test_make_data_snapshot_defaults_instance_to_session():
    with HarnessSession().init(project_id="my-project"):
        snap = make_data_snapshot("v", "a/b")
    assert snap.instance == "https://my-project.firebaseio.com"


def test_make_data_snapshot_without_session():
    assert make_data_snapshot("v", "a/b").instance is None
