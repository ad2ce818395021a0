# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from collections import OrderedDict


def walk_scopes(document):
    """Yields (path, node) for every scope, depth first in declaration order."""

    def walk(node, parents):
        path = parents + [node.name]
        yield ".".join(path), node
        for child in node.children:
            yield from walk(child, path)

    for root in document.header.roots:
        yield from walk(root, [])


def signals(document):
    """
    Maps the hierarchical name of every port, e.g. TOP.ALU4.lhs, to the Port.
    The same identifier shows up under several names when a signal is
    visible in more than one scope.
    """
    result = OrderedDict()
    for path, node in walk_scopes(document):
        for port in node.ports:
            result[path + "." + port.name] = port
    return result


def aliases(document):
    result = OrderedDict()
    for name, port in signals(document).items():
        result.setdefault(port.identifier, list()).append(name)
    return result


def signal_changes(document, identifier):
    """
    Yields (time, value) for every change to identifier. Values from the
    $dumpvars snapshot come first with a time of None.
    """
    for change in document.initial_dump:
        if change.identifier == identifier:
            yield None, change.value
    for timestamp in document.timestamps:
        for change in timestamp.changes:
            if change.identifier == identifier:
                yield timestamp.time, change.value
