import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from lottery_sim.persistence import JsonFileBackend, MemoryBackend, Storage  # noqa: E402


@pytest.fixture()
def memory_backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def storage(memory_backend: MemoryBackend) -> Storage:
    """Available storage over a shared in-memory backend."""
    return Storage(memory_backend, available=True)


@pytest.fixture()
def file_backend(tmp_path: Path) -> JsonFileBackend:
    return JsonFileBackend(tmp_path / "data" / "storage.json")
