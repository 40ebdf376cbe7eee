"""Shared fixtures for rdu tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point the config lookup at an empty directory."""
    config_dir = tmp_path_factory.mktemp("rdu-config")
    monkeypatch.setenv("RDU_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def sample_tree(tmp_path):
    """
    Build a small tree:

        root/
          a            10 bytes
          b          1024 bytes
          sub/
            c         100 bytes
            deeper/
              d         5 bytes
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a").write_bytes(b"x" * 10)
    (root / "b").write_bytes(b"x" * 1024)
    deeper = root / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (root / "sub" / "c").write_bytes(b"x" * 100)
    (deeper / "d").write_bytes(b"x" * 5)
    return root
