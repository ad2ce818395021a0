# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from waver.model import Timestamp


class ValueChangeLog:
    def __init__(self):
        """
        ValueChangeLog groups changes under the timestamp they follow. Every
        change is kept in encounter order, a second change to an identifier
        within the same timestamp is appended rather than overwriting the
        first. The $dumpvars snapshot is kept apart from the timestamps.
        """
        self.initial_dump = list()
        self.timestamps = list()
        self.time = None
        self.changes = None

    @property
    def is_open(self):
        return self.time is not None

    def open(self, time):
        if self.is_open:
            self.close()
        self.time = time
        self.changes = list()

    def append(self, change):
        if not self.is_open:
            raise Exception("no timestamp open for {}".format(change))
        self.changes.append(change)

    def dump(self, change):
        self.initial_dump.append(change)

    def close(self):
        if not self.is_open:
            return
        self.timestamps.append(Timestamp(self.time, tuple(self.changes)))
        self.time = None
        self.changes = None

    def build(self):
        """Returns the initial dump and the timestamps as tuples."""
        self.close()
        return tuple(self.initial_dump), tuple(self.timestamps)
