import os

from rpcgate.config import access
from rpcgate.config.loader import save_config
from rpcgate.config.schema import Config


def test_get_config_uses_cache_and_force_reload(monkeypatch, tmp_path):
    calls = {"n": 0}

    def _fake_load_config(_path=None):
        calls["n"] += 1
        cfg = Config()
        cfg.server.port = 18000 + calls["n"]
        return cfg

    monkeypatch.setattr(access, "load_config", _fake_load_config)
    access.clear_config_cache()
    path = tmp_path / "config.json"

    first = access.get_config(config_path=path)
    second = access.get_config(config_path=path)
    third = access.get_config(config_path=path, force_reload=True)

    assert first is second
    assert third.server.port != second.server.port
    assert calls["n"] == 2
    access.clear_config_cache()


def test_get_config_reloads_after_file_changes(tmp_path):
    path = tmp_path / "config.json"
    access.clear_config_cache()
    assert access.get_config(config_path=path).server.port == 18800

    cfg = Config()
    cfg.server.port = 19123
    save_config(cfg, path)
    assert access.get_config(config_path=path).server.port == 19123

    cfg.server.port = 19124
    save_config(cfg, path)
    # Force a distinct mtime even on coarse-grained filesystems.
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))
    assert access.get_config(config_path=path).server.port == 19124
    access.clear_config_cache()
