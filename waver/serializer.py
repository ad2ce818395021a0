# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

import json

from waver.config import Constant
from waver.model import (
    Change,
    Document,
    Header,
    Port,
    ScopeKind,
    ScopeNode,
    Timestamp,
)


def emit(node):
    """
    Converts one node of a Document into plain dicts and lists, depth first.
    Lists keep the order of the Document, nothing is sorted or merged.
    """
    if type(node) == Document:
        return {
            "header": emit(node.header),
            "dumpvars": [emit(change) for change in node.initial_dump],
            "value_changes": [emit(timestamp) for timestamp in node.timestamps],
        }
    elif type(node) == Header:
        j = {"scopes": [emit(scope) for scope in node.roots]}
        # empty or absent header text is left out
        if node.version:
            j["version"] = node.version
        if node.date:
            j["date"] = node.date
        if node.timescale:
            j["timescale"] = node.timescale
        return j
    elif type(node) == ScopeNode:
        j = {"type": node.kind.value, "name": node.name}
        if node.kind is ScopeKind.MODULE:
            j["ports"] = [emit(port) for port in node.ports]
        j["subscopes"] = [emit(child) for child in node.children]
        return j
    elif type(node) == Port:
        return {
            "name": node.name,
            "type": node.kind.name.lower(),
            "width": node.width,
            "identifier": node.identifier,
            "reference": node.reference,
        }
    elif type(node) == Timestamp:
        return {str(node.time): [emit(change) for change in node.changes]}
    elif type(node) == Change:
        return {node.identifier: node.value}
    else:
        raise Exception("unknown node type at {}".format(node))


def to_json(document):
    if type(document) != Document:
        raise Exception("expected a Document, got {}".format(type(document)))
    return emit(document)


def dumps(document, indent=Constant.JSON_INDENT.value):
    return json.dumps(to_json(document), indent=indent)


def dump(document, f, indent=Constant.JSON_INDENT.value):
    json.dump(to_json(document), f, indent=indent)
    f.write("\n")
