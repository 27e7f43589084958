"""Shared pytest configuration, marker assignment and converter test doubles."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeConverter:
    """Converter double that writes a small file per call.

    Filenames listed in ``raise_for`` raise, ``reject_for`` return ``False``
    and ``silent_for`` return ``True`` without writing anything.
    """

    def __init__(self, payload: bytes = b"x") -> None:
        self.payload = payload
        self.raise_for: set[str] = set()
        self.reject_for: set[str] = set()
        self.silent_for: set[str] = set()
        self.calls: list[tuple[Path, Path]] = []
        self._lock = threading.Lock()

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        with self._lock:
            self.calls.append((source_path, destination_path))
        name = source_path.name
        if name in self.raise_for:
            raise RuntimeError(f"cannot render {name}")
        if name in self.reject_for:
            return False
        if name not in self.silent_for:
            destination_path.write_bytes(self.payload)
        return True


class ConcurrencyProbe:
    """Converter double recording the peak number of concurrent calls."""

    def __init__(self, delay: float = 0.05) -> None:
        self.delay = delay
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        del source_path
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            time.sleep(self.delay)
            destination_path.write_bytes(b"%PDF")
            return True
        finally:
            with self._lock:
                self.active -= 1


@pytest.fixture
def fake_converter() -> FakeConverter:
    """Return a converter double that succeeds by default."""
    return FakeConverter()


@pytest.fixture
def concurrency_probe() -> ConcurrencyProbe:
    """Return an instrumented converter that sleeps during each call."""
    return ConcurrencyProbe()


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """Create files (with parents) below ``tmp_path / "src"`` and return the root."""

    def _make(*relative_paths: str, content: bytes = b"%PDF-1.4 fake") -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for relative in relative_paths:
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return root

    return _make


@pytest.fixture
def make_pdf() -> Callable[..., Path]:
    """Write a real PDF with ``pages`` blank pages to the given path."""
    from pypdf import PdfWriter

    def _make(path: Path, pages: int = 1, title: str = "fixture") -> Path:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=200, height=200)
        writer.add_metadata({"/Title": title})
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _make
