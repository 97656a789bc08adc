from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from sugarcharts.errors import ChartDataError, EmptySeriesError
from sugarcharts.series import Entry, normalize_entries


class NormalizeEntriesTests(unittest.TestCase):
    def test_accepts_mixed_entry_shapes_in_order(self) -> None:
        entries = normalize_entries(
            [
                Entry(label="jan", value=12.0),
                ("feb", 22),
                {"label": "mar", "value": Decimal("35.5")},
                ("apr", np.float32(4.0)),
            ]
        )
        self.assertEqual([e.label for e in entries], ["jan", "feb", "mar", "apr"])
        self.assertEqual([e.value for e in entries], [12.0, 22.0, 35.5, 4.0])
        self.assertIsInstance(entries, tuple)

    def test_missing_label_becomes_empty_string(self) -> None:
        entries = normalize_entries([{"value": 3}, (None, 4)])
        self.assertEqual(entries, (Entry(label="", value=3.0), Entry(label="", value=4.0)))

    def test_default_entry(self) -> None:
        self.assertEqual(Entry(), Entry(label="", value=0.0))

    def test_empty_input_raises_empty_series(self) -> None:
        with self.assertRaises(EmptySeriesError):
            normalize_entries([])

    def test_empty_series_is_a_chart_data_error(self) -> None:
        self.assertTrue(issubclass(EmptySeriesError, ChartDataError))
        self.assertTrue(issubclass(ChartDataError, ValueError))

    def test_rejects_non_numeric_value(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "not numeric"):
            normalize_entries([("jan", "twelve")])

    def test_rejects_bool_value(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "bool"):
            normalize_entries([("jan", True)])

    def test_rejects_non_finite_value(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "not finite"):
            normalize_entries([("jan", float("nan"))])

    def test_rejects_unsupported_container(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "unsupported entries input type"):
            normalize_entries("jan")
        with self.assertRaises(ChartDataError):
            normalize_entries(None)

    def test_rejects_mapping_without_value(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "missing `value`"):
            normalize_entries([{"label": "jan"}])

    @unittest.skipUnless(importlib.util.find_spec("pandas") is not None, "pandas not installed")
    def test_accepts_dataframe_with_label_and_value_columns(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"label": ["jan", "feb"], "value": [1, 2.5]})
        entries = normalize_entries(frame)
        self.assertEqual(entries, (Entry("jan", 1.0), Entry("feb", 2.5)))

        with self.assertRaisesRegex(ChartDataError, "column not found"):
            normalize_entries(pd.DataFrame({"value": [1.0]}))


if __name__ == "__main__":
    unittest.main()
