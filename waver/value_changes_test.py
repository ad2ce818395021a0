# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

import unittest

from waver.model import Change, Timestamp
from waver.value_changes import *


class ValueChangeLogTest(unittest.TestCase):
    def setUp(self):
        self.log = ValueChangeLog()

    def test_repeated_identifier(self):
        self.log.open(5)
        self.log.append(Change("!", "0"))
        self.log.append(Change("!", "1"))
        initial_dump, timestamps = self.log.build()
        self.assertEqual(initial_dump, ())
        self.assertEqual(
            timestamps, (Timestamp(5, (Change("!", "0"), Change("!", "1"))),)
        )

    def test_open_closes_previous(self):
        self.log.open(1)
        self.log.append(Change("a", "1"))
        self.log.open(2)
        self.log.close()
        self.assertEqual(
            self.log.timestamps,
            [Timestamp(1, (Change("a", "1"),)), Timestamp(2, ())],
        )

    def test_initial_dump_is_separate(self):
        self.log.dump(Change("a", "x"))
        self.log.open(0)
        self.log.dump(Change("b", "0"))
        initial_dump, timestamps = self.log.build()
        self.assertEqual(initial_dump, (Change("a", "x"), Change("b", "0")))
        self.assertEqual(timestamps, (Timestamp(0, ()),))

    def test_append_without_timestamp(self):
        with self.assertRaises(Exception):
            self.log.append(Change("a", "1"))


if __name__ == "__main__":
    unittest.main()
