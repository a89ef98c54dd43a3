"""Short, seeded run of the compiler fuzzer as part of the unit test suite."""

import unittest

from tests.fuzzing.fuzz import FuzzRunner, discover_fuzzers
from tests.fuzzing.fuzz_compile import CompileFuzzer


class TestCompileFuzzer(unittest.TestCase):
    def test_seeded_run(self):
        runner = FuzzRunner(examples=30, steps=15, seed=1234, quiet=True)
        fuzzer = CompileFuzzer()
        self.assertTrue(runner.run(fuzzer))
        self.assertEqual(fuzzer.operations, 30 * 15)

    def test_discovery(self):
        self.assertIn(CompileFuzzer, discover_fuzzers())


if __name__ == "__main__":
    unittest.main()
