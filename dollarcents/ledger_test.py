import os
import tempfile
import unittest

from mock import MagicMock

from dollarcents import ledger
from dollarcents.dollars import Dollars, INT64_MAX, INT64_MIN


class ParseAmountsTest(unittest.TestCase):
    def test_parse_amounts(self):
        result = ledger.parse_amounts(["$12.34", "  -$0.01 ", "+5"])
        self.assertTrue(result.success)
        self.assertEqual(
            result.values(), [Dollars(1234), Dollars(-1), Dollars(500)])
        self.assertEqual(result.amounts[1].line_no, 2)
        self.assertEqual(result.amounts[1].text, "-$0.01")
        self.assertEqual(result.total(), Dollars(1733))

    def test_skips_blank_and_comment_lines(self):
        result = ledger.parse_amounts(["# groceries", "", "   ", "$1.00"])
        self.assertTrue(result.success)
        self.assertEqual(len(result.amounts), 1)
        self.assertEqual(result.amounts[0].line_no, 4)

    def test_exact_strings(self):
        with self.assertLogs("dollarcents.ledger", level="WARNING"):
            result = ledger.parse_amounts(["#5", " 5", "", "$1"], file_lines=False)
        self.assertEqual(result.values(), [Dollars(0), Dollars(100)])
        self.assertEqual([e.text for e in result.errors], ["#5", " 5"])
        self.assertEqual([a.line_no for a in result.amounts], [3, 4])

    def test_collects_errors(self):
        with self.assertLogs("dollarcents.ledger", level="WARNING") as logs:
            result = ledger.parse_amounts(["$1.00", "12.3", "1x", "$2.50"])
        self.assertFalse(result.success)
        self.assertEqual(result.values(), [Dollars(100), Dollars(250)])
        self.assertEqual([e.line_no for e in result.errors], [2, 3])
        self.assertEqual(
            result.errors[0].message,
            "failed to parse dollars: cents must be two digits long")
        self.assertEqual(
            result.errors[1].message, "failed to parse dollars: invalid digit 'x'")
        self.assertEqual(len(logs.records), 2)

    def test_progress(self):
        progress = MagicMock()
        factory = MagicMock(return_value=progress)
        ledger.parse_amounts(["1", "2", "# three"], "Label", 3, factory)
        factory.assert_called_once_with("Label", 3)
        self.assertEqual(progress.next.call_count, 3)
        progress.finish.assert_called_once_with()


class TotalTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(ledger.total([]), Dollars(0))

    def test_total(self):
        self.assertEqual(
            ledger.total([Dollars(100), Dollars(-250), Dollars(5)]), Dollars(-145))

    def test_total_wraps(self):
        self.assertEqual(
            ledger.total([Dollars(INT64_MAX), Dollars(1)]), Dollars(INT64_MIN))


class ReadAmountsFileTest(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".txt")
        os.close(fd)

    def tearDown(self):
        os.remove(self.path)

    def write(self, contents):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(contents)

    def test_read_amounts_file(self):
        self.write("# lunch\n$12.34\n-$2.00\n\n+5\n")
        result = ledger.read_amounts_file(self.path)
        self.assertTrue(result.success)
        self.assertEqual(
            result.values(), [Dollars(1234), Dollars(-200), Dollars(500)])
        self.assertEqual([a.line_no for a in result.amounts], [2, 3, 5])

    def test_strips_bom(self):
        self.write("\ufeff$1.00\n")
        result = ledger.read_amounts_file(self.path)
        self.assertTrue(result.success)
        self.assertEqual(result.values(), [Dollars(100)])

    def test_non_ascii_line(self):
        self.write("café\n$1.00\n")
        with self.assertLogs("dollarcents.ledger", level="WARNING"):
            result = ledger.read_amounts_file(self.path)
        self.assertEqual(
            result.errors[0].message,
            "failed to parse dollars: non-ASCII strings are not allowed")
        self.assertEqual(result.values(), [Dollars(100)])


if __name__ == "__main__":
    unittest.main()
