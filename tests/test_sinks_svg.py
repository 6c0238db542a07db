"""Tests for solution sinks and SVG rendering."""

from io import StringIO
from pathlib import Path
import sys
import tempfile
import unittest
import xml.etree.ElementTree as ET

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from peaceful_queens.backtracking import search
from peaceful_queens.sinks import (
    CollectingSink,
    ConsolePrintSink,
    CountingSink,
    SvgExportSink,
    TeeSink,
)
from peaceful_queens.svg import export_svg, render_svg, solution_file_name

SVG_NS = "{http://www.w3.org/2000/svg}"


class SinkTests(unittest.TestCase):
    def test_console_sink_prints_one_line_per_solution(self):
        stream = StringIO()
        count = search(4, ConsolePrintSink(stream))
        lines = stream.getvalue().splitlines()
        self.assertEqual(len(lines), count)
        self.assertEqual(sorted(lines), ["1 3 0 2", "2 0 3 1"])

    def test_svg_sink_keeps_files_apart_on_wide_boards(self):
        first = (1, 10, 2, 3, 4, 5, 6, 7, 8, 9, 0)
        second = (11, 0, 2, 3, 4, 5, 6, 7, 8, 9, 1)
        with tempfile.TemporaryDirectory() as tmpdir:
            sink = SvgExportSink(tmpdir, square=8)
            sink.accept(first, 11, 0)
            sink.accept(second, 11, 1)
            self.assertEqual(len(list(Path(tmpdir).glob("*.svg"))), 2)
            self.assertEqual(len(set(sink.paths)), 2)

    def test_tee_sink_forwards_in_order(self):
        counter, collector = CountingSink(), CollectingSink()
        search(5, TeeSink(counter, collector))
        self.assertEqual(counter.count, 10)
        self.assertEqual(len(collector), 10)

    def test_svg_sink_writes_one_file_per_solution(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            out_dir = Path(tmpdir) / "boards"
            sink = SvgExportSink(out_dir)
            search(4, sink)
            names = sorted(p.name for p in out_dir.iterdir())
            self.assertEqual(names, ["1302.svg", "2031.svg"])
            self.assertEqual(sorted(p.name for p in sink.paths), names)


class SvgRenderTests(unittest.TestCase):
    def test_file_name_concatenates_columns(self):
        self.assertEqual(solution_file_name((1, 3, 0, 2)), "1302.svg")
        self.assertEqual(solution_file_name((0,)), "0.svg")

    def test_document_structure(self):
        document = render_svg((1, 3, 0, 2))
        self.assertTrue(document.startswith('<?xml version="1.0" encoding="UTF-8"?>'))
        root = ET.fromstring(document.split("\n", 1)[1])
        self.assertEqual(root.tag, f"{SVG_NS}svg")
        self.assertEqual(root.get("width"), "160")
        self.assertEqual(root.get("viewBox"), "-4 -4 160 160")

        style = root.find(f"{SVG_NS}style")
        self.assertIn("r:11", style.text)

        rects = root.findall(f"{SVG_NS}rect")
        # outline plus half of the 16 squares
        self.assertEqual(len(rects), 1 + 8)
        self.assertEqual(rects[0].get("fill"), "none")
        self.assertEqual(rects[0].get("width"), "128")

        circles = [(c.get("cx"), c.get("cy")) for c in root.findall(f"{SVG_NS}circle")]
        self.assertEqual(circles, [("16", "48"), ("48", "112"), ("80", "16"), ("112", "80")])

    def test_dark_squares_have_odd_parity(self):
        root = ET.fromstring(render_svg((0,) * 3, square=10).split("\n", 1)[1])
        squares = root.findall(f"{SVG_NS}rect")[1:]
        coords = {(int(r.get("x")) // 10, int(r.get("y")) // 10) for r in squares}
        self.assertEqual(coords, {(0, 1), (1, 0), (1, 2), (2, 1)})

    def test_wide_boards_use_separated_names(self):
        self.assertEqual(solution_file_name((1, 10) + tuple(range(9))), "1-10-0-1-2-3-4-5-6-7-8.svg")
        self.assertNotEqual(
            solution_file_name((1, 10) + tuple(range(9))),
            solution_file_name((11, 0) + tuple(range(9))),
        )

    def test_wide_board_names_are_unique(self):
        sink = CollectingSink()
        count = search(11, sink)
        names = {solution_file_name(placement) for placement in sink.solutions}
        self.assertEqual(len(names), count)

    def test_invalid_square_size(self):
        with self.assertRaises(ValueError):
            render_svg((0,), square=0)

    def test_export_writes_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = export_svg((2, 0, 3, 1), tmpdir, square=20)
            self.assertEqual(path.name, "2031.svg")
            self.assertEqual(path.read_text(encoding="utf-8"), render_svg((2, 0, 3, 1), 20))


if __name__ == "__main__":
    unittest.main()
