# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from enum import Enum


class Constant(Enum):
    SENTINEL = ""
    LINE_TERMINATORS = "\r\n\t\v\f"
    OUTPUT_EXTENSION = ".json"
    JSON_INDENT = 2
    TIME_PREFIX = "#"
    KEYWORD_PREFIX = "$"
    RADIX_PREFIXES = "bBrR"


class Keyword(Enum):
    VERSION = "$version"
    DATE = "$date"
    TIMESCALE = "$timescale"
    COMMENT = "$comment"
    SCOPE = "$scope"
    UPSCOPE = "$upscope"
    VAR = "$var"
    END = "$end"
    ENDDEFINITIONS = "$enddefinitions"
    DUMPVARS = "$dumpvars"
    DUMPALL = "$dumpall"
    DUMPON = "$dumpon"
    DUMPOFF = "$dumpoff"
    MODULE = "module"
    TASK = "task"
    WIRE = "wire"
    REG = "reg"


# blocks consumed whole and dropped when they appear in the value change section
ignored_blocks = [
    Keyword.COMMENT.value,
    Keyword.DUMPALL.value,
    Keyword.DUMPON.value,
    Keyword.DUMPOFF.value,
]
