import struct
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import numpy as np

from mcquad.models.results import ResultSet
from mcquad.reporting.result_file import ResultFileError, read_result_file, write_result_file


class ResultFileTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_layout_is_native_int32_header_then_doubles(self) -> None:
        path = write_result_file(self.tmp / "out.bin", [0.5, 0.25, -1.0])
        payload = path.read_bytes()
        self.assertEqual(len(payload), 4 + 3 * 8)
        self.assertEqual(struct.unpack("=i", payload[:4])[0], 3)
        self.assertEqual(struct.unpack("=3d", payload[4:]), (0.5, 0.25, -1.0))

    def test_writes_result_set(self) -> None:
        results = ResultSet(trial_means=[0.1, 0.2, 0.3, 0.4], worker_trial_counts=[2, 2])
        path = write_result_file(self.tmp / "nested" / "out.bin", results)
        np.testing.assert_array_equal(read_result_file(path), results.trial_means)

    def test_empty_result_file(self) -> None:
        path = write_result_file(self.tmp / "empty.bin", [])
        self.assertEqual(path.read_bytes(), struct.pack("=i", 0))
        self.assertEqual(read_result_file(path).size, 0)

    def test_truncated_payload_rejected(self) -> None:
        path = self.tmp / "bad.bin"
        path.write_bytes(struct.pack("=i", 4) + struct.pack("=2d", 0.1, 0.2))
        with self.assertRaises(ResultFileError):
            read_result_file(path)

    def test_missing_header_rejected(self) -> None:
        path = self.tmp / "short.bin"
        path.write_bytes(b"\x01")
        with self.assertRaises(ResultFileError):
            read_result_file(path)

    def test_no_temp_file_left_behind(self) -> None:
        write_result_file(self.tmp / "out.bin", [1.0])
        self.assertEqual(sorted(p.name for p in self.tmp.iterdir()), ["out.bin"])

    def test_failed_write_removes_temp_file(self) -> None:
        with mock.patch.object(Path, "replace", side_effect=OSError("disk full")):
            with self.assertRaises(OSError):
                write_result_file(self.tmp / "out.bin", [1.0, 2.0])
        self.assertEqual(list(self.tmp.iterdir()), [])

    def test_rewrite_replaces_existing_file(self) -> None:
        write_result_file(self.tmp / "out.bin", [1.0, 2.0, 3.0])
        path = write_result_file(self.tmp / "out.bin", [4.0])
        self.assertEqual(read_result_file(path).tolist(), [4.0])
        self.assertEqual(sorted(p.name for p in self.tmp.iterdir()), ["out.bin"])


if __name__ == "__main__":
    unittest.main()
