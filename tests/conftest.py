# MediaSync Test Fixtures
# Pytest fixtures for MediaSync tests

import tempfile
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest
import yaml
from rich.console import Console as RichConsole

from mediasync.config.schema import Catalog
from mediasync.output.console import Console


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate every test from the real home directory and config overrides."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MEDIASYNC_CONFIG", raising=False)
    monkeypatch.delenv("MEDIASYNC_VOLUMES_ROOT", raising=False)
    return home


@pytest.fixture
def card_dir(temp_dir: Path) -> Path:
    """Create a mock camera card with a clip folder."""
    clips = temp_dir / "Untitled" / "M4ROOT" / "CLIP"
    clips.mkdir(parents=True)
    (clips / "C0001.MP4").write_bytes(b"\x00" * 16)
    return clips


@pytest.fixture
def volumes_root(temp_dir: Path) -> Path:
    """Create a mount root with a few volumes."""
    root = temp_dir / "Volumes"
    for name in ("HOT_A", "OTHER", "HOT_B"):
        (root / name).mkdir(parents=True)
    return root


@pytest.fixture
def sample_config(temp_dir: Path, card_dir: Path) -> dict:
    """Create sample catalog dict with one volume and one path config."""
    return {
        "sync_command": "rsync",
        "configs": [
            {
                "name": "Hot Backup",
                "description": "Mirror backup",
                "volume_pattern": "^HOT_",
                "sources": [
                    {"path": str(temp_dir / "Movies") + "/", "destination": "Video"},
                    {"path": str(temp_dir / "Photos") + "/", "destination": "Photography/2025"},
                ],
                "sync_flags": ["-av", "--delete", "--progress"],
            },
            {
                "name": "Sony FX3",
                "description": "Import footage",
                "sources": [
                    {"path": str(card_dir) + "/", "destination": str(temp_dir / "Footage")},
                ],
                "sync_flags": ["-av", "--progress", "--include=*.MP4", "--exclude=*"],
            },
        ],
    }


@pytest.fixture
def sample_catalog(sample_config: dict) -> Catalog:
    return Catalog.model_validate(sample_config)


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "mediasync"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer."""
    c = Console(colored=False)
    c._console = RichConsole(file=StringIO(), no_color=True, width=200)
    return c
