import storage.storage_factory as factory_mod
from storage.memory_storage import MemoryStorage
from storage.storage_factory import get_storage


def test_get_storage_uses_config_defaults(monkeypatch):
    monkeypatch.setattr(factory_mod, "STORAGE_SIZE", 42)
    monkeypatch.setattr(factory_mod, "STORAGE_EXPIRATION_MS", 500)
    monkeypatch.setattr(factory_mod, "STORAGE_VERBOSE", True)

    s = get_storage()
    assert isinstance(s, MemoryStorage)
    assert s.storage_size == 42
    assert s.expiration == 500
    assert s.verbose is True


def test_get_storage_explicit_arguments_win(monkeypatch):
    monkeypatch.setattr(factory_mod, "STORAGE_VERBOSE", True)

    s = get_storage(storage_size=7, expiration=30, verbose=False)
    assert s.storage_size == 7
    assert s.expiration == 30
    assert s.verbose is False
