"""Thread-safety integration tests for concurrent detect() calls."""

from __future__ import annotations

import threading

from textformat import detect

_SAMPLES: list[str] = [
    "┌─────────────┐\n│   Hello     │\n│   World     │\n└─────────────┘",
    "# Title\n\n- one\n- two\n\n[link](https://example.com)",
    '{\n  "name": "John",\n  "age": 30\n}',
    "function test() {\n  const x = 1;\n  return x;\n}",
    "This is a paragraph of plain text.\nIt has a second line.\nAnd a third.",
]


def _run_concurrent_detect(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each calling detect() *iterations* times.

    Returns a list of error strings (empty = success).
    """
    expected = {text: detect(text) for text in _SAMPLES}
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(text: str) -> None:
        barrier.wait()
        for _ in range(iterations):
            result = detect(text)
            if result != expected[text]:
                errors.append(f"Expected {expected[text]!r}, got {result!r}")

    threads = []
    for _ in range(n_workers):
        for text in _SAMPLES:
            t = threading.Thread(target=worker, args=(text,))
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_detect_no_corruption():
    """Multiple threads calling detect() simultaneously must agree with serial runs."""
    errors = _run_concurrent_detect(n_workers=3, iterations=20)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_detect_high_concurrency():
    errors = _run_concurrent_detect(n_workers=8, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])
