# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from waver.model import ScopeKind, ScopeNode


class PendingScope:
    def __init__(self, parent):
        self.parent = parent
        self.name = None
        self.kind = ScopeKind.UNKNOWN
        self.ports = list()
        self.children = list()

    def __repr__(self):
        return "PendingScope({}, {}, {} ports, {} children)".format(
            self.name, self.kind.value, len(self.ports), len(self.children)
        )


class ScopeTreeBuilder:
    def __init__(self, debug=False):
        """
        ScopeTreeBuilder tracks the scopes opened by $scope and not yet closed
        by $upscope. Nodes live in an arena and refer to each other by index.

        A node is allocated when its $scope keyword is seen, described once
        its kind and name are known, and handed to its parent only when it is
        closed. Until then the parent does not list it, so siblings never see
        an incomplete node.
        """
        self.debug = debug
        self.nodes = list()
        self.stack = list()
        self.roots = list()

    @property
    def depth(self):
        return len(self.stack)

    def current(self):
        if len(self.stack) == 0:
            raise Exception("no open scope")
        return self.nodes[self.stack[-1]]

    def open(self):
        parent = self.stack[-1] if len(self.stack) > 0 else None
        index = len(self.nodes)
        self.nodes.append(PendingScope(parent))
        self.stack.append(index)
        return index

    def describe(self, kind, name):
        node = self.current()
        node.kind = kind
        node.name = name
        if self.debug:
            print("scope {} {} at depth {}".format(kind.value, name, self.depth))

    def add_port(self, port):
        node = self.current()
        if node.kind is not ScopeKind.MODULE:
            raise Exception(
                "ports can only be added to modules, got {}".format(node)
            )
        node.ports.append(port)

    def close(self):
        index = self.stack.pop()
        node = self.nodes[index]
        if node.parent is None:
            self.roots.append(index)
        else:
            self.nodes[node.parent].children.append(index)
        if self.debug:
            print("upscope {}".format(node.name))
        return index

    def freeze(self, index):
        node = self.nodes[index]
        return ScopeNode(
            name=node.name,
            kind=node.kind,
            ports=tuple(node.ports),
            children=tuple(self.freeze(child) for child in node.children),
        )

    def build(self):
        """Returns the finished root scopes in declaration order."""
        if len(self.stack) != 0:
            raise Exception(
                "{} scopes still open: {}".format(
                    len(self.stack), [self.nodes[i] for i in self.stack]
                )
            )
        return tuple(self.freeze(index) for index in self.roots)
