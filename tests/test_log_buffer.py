from __future__ import annotations

import threading
import unittest

from engine.log_buffer import DEFAULT_LOG_CAPACITY, LogBuffer


class LogBufferTests(unittest.TestCase):
    def test_default_capacity_is_one_thousand(self) -> None:
        self.assertEqual(LogBuffer().capacity, 1000)
        self.assertEqual(DEFAULT_LOG_CAPACITY, 1000)

    def test_append_preserves_insertion_order(self) -> None:
        buf = LogBuffer()
        buf.append("first")
        buf.append("")
        buf.append("third")
        self.assertEqual(buf.snapshot(), ("first", "", "third"))

    def test_overflow_keeps_most_recent_entries_oldest_first(self) -> None:
        buf = LogBuffer()
        for i in range(1500):
            buf.append(f"line {i}")

        lines = buf.snapshot()
        self.assertEqual(len(lines), 1000)
        self.assertEqual(lines[0], "line 500")
        self.assertEqual(lines[-1], "line 1499")
        self.assertEqual(list(lines), [f"line {i}" for i in range(500, 1500)])

    def test_append_at_capacity_evicts_exactly_one(self) -> None:
        buf = LogBuffer(capacity=3)
        for line in ("a", "b", "c"):
            buf.append(line)
        buf.append("d")
        self.assertEqual(buf.snapshot(), ("b", "c", "d"))
        self.assertEqual(len(buf), 3)

    def test_snapshot_is_an_immutable_copy(self) -> None:
        buf = LogBuffer()
        buf.append("a")
        snap = buf.snapshot()
        buf.append("b")
        self.assertIsInstance(snap, tuple)
        self.assertEqual(snap, ("a",))

    def test_revision_counts_every_append(self) -> None:
        buf = LogBuffer(capacity=2)
        self.assertEqual(buf.revision, 0)
        for line in ("a", "b", "c", "d"):
            buf.append(line)
        self.assertEqual(buf.revision, 4)

    def test_versioned_snapshot_pairs_revision_with_lines(self) -> None:
        buf = LogBuffer(capacity=2)
        self.assertEqual(buf.versioned_snapshot(), (0, ()))
        for line in ("a", "b", "c"):
            buf.append(line)
        revision, lines = buf.versioned_snapshot()
        self.assertEqual(revision, 3)
        self.assertEqual(lines, ("b", "c"))
        self.assertEqual((revision, lines), (buf.revision, buf.snapshot()))

    def test_rejects_non_positive_capacity(self) -> None:
        for bad in (0, -1, True, "10"):
            with self.assertRaises(ValueError):
                LogBuffer(capacity=bad)  # type: ignore[arg-type]

    def test_concurrent_producers_do_not_lose_or_tear_lines(self) -> None:
        buf = LogBuffer(capacity=10_000)
        producers = 8
        per_producer = 500
        start = threading.Barrier(producers)

        def _produce(worker: int) -> None:
            start.wait()
            for i in range(per_producer):
                buf.append(f"worker-{worker}:{i}")

        threads = [threading.Thread(target=_produce, args=(w,)) for w in range(producers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = buf.snapshot()
        self.assertEqual(len(lines), producers * per_producer)
        self.assertEqual(buf.revision, producers * per_producer)
        for w in range(producers):
            own = [line for line in lines if line.startswith(f"worker-{w}:")]
            self.assertEqual(own, [f"worker-{w}:{i}" for i in range(per_producer)])


if __name__ == "__main__":
    unittest.main()
