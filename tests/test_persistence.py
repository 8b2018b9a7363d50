import pytest

from displaydev.logger import LogLevel, Logger
from displaydev.persistence import (
    FileSettingsPersistence,
    NoopSettingsPersistence,
    SettingsPersistence,
)


@pytest.fixture
def errors():
    captured = []
    logger = Logger.get()
    logger.set_custom_callback(lambda lvl, value: captured.append((lvl, value)))
    yield captured
    logger.set_custom_callback(None)


def test_noop_store():
    impl = NoopSettingsPersistence()
    assert impl.store(b"") is True
    assert impl.store(bytes([0x01, 0x02, 0x03])) is True


def test_noop_load():
    assert NoopSettingsPersistence().load() == b""


def test_noop_clear():
    assert NoopSettingsPersistence().clear() is True


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        SettingsPersistence()


def test_file_empty_filename():
    with pytest.raises(ValueError, match="Empty filename provided for FileSettingsPersistence!"):
        FileSettingsPersistence("")


def test_file_store_and_load(tmp_path):
    impl = FileSettingsPersistence(tmp_path / "settings.json")
    assert impl.store(bytes([0x01, 0x02, 0x03])) is True
    assert impl.load() == bytes([0x01, 0x02, 0x03])


def test_file_store_truncates(tmp_path):
    impl = FileSettingsPersistence(str(tmp_path / "settings.json"))
    assert impl.store(b"long content") is True
    assert impl.store(b"ab") is True
    assert impl.load() == b"ab"


def test_file_load_missing_returns_empty(tmp_path):
    assert FileSettingsPersistence(tmp_path / "missing.json").load() == b""


def test_file_clear(tmp_path):
    path = tmp_path / "settings.json"
    impl = FileSettingsPersistence(path)
    assert impl.store(b"data") is True
    assert impl.clear() is True
    assert not path.exists()
    assert impl.load() == b""


def test_file_clear_missing_is_ok(tmp_path):
    assert FileSettingsPersistence(tmp_path / "missing.json").clear() is True


def test_file_store_into_missing_directory_fails(tmp_path, errors):
    impl = FileSettingsPersistence(tmp_path / "no_dir" / "settings.json")
    assert impl.store(b"data") is False
    assert len(errors) == 1
    assert errors[0][0] == LogLevel.error
    assert errors[0][1].startswith("Failed to write to ")


def test_file_load_directory_fails(tmp_path, errors):
    impl = FileSettingsPersistence(tmp_path)
    assert impl.load() is None
    assert errors and errors[0][0] == LogLevel.error


def test_file_clear_non_empty_directory_fails(tmp_path, errors):
    directory = tmp_path / "dir"
    directory.mkdir()
    (directory / "child").write_bytes(b"x")
    impl = FileSettingsPersistence(directory)
    assert impl.clear() is False
    assert directory.exists()
    assert errors[0][1].startswith("Failed to remove ")