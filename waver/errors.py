# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from enum import Enum


class LoadErrorCode(Enum):
    ALREADY_LOADED = "content already loaded"
    NOT_FOUND = "file not found"
    UNREADABLE = "file is not readable"
    EMPTY_CONTENT = "no content to tokenize"
    ALREADY_TOKENIZED = "content already tokenized"


class ParseErrorCode(Enum):
    # unrecoverable
    UNEXPECTED_END_OF_FILE = "unexpected end of file"
    INVALID_SCOPE = "invalid scope"
    INVALID_SIGNAL_WIDTH = "invalid signal width"
    UNKNOWN_KEYWORD = "unknown keyword"
    # distinct codes, still fatal
    INVALID_SIGNAL_TYPE = "invalid signal type"
    INVALID_TIMESTAMP = "invalid timestamp"
    ALREADY_PARSED = "parser already used"


class WaverError(Exception):
    pass


class LoadError(WaverError):
    def __init__(self, code, detail=None):
        self.code = code
        self.detail = detail
        message = code.value
        if detail is not None:
            message = "{}: {}".format(message, detail)
        super().__init__(message)


class ParseError(WaverError):
    def __init__(self, code, token=None):
        """
        Raised on the first grammar violation. The offending token is kept
        for diagnostics, it is None when no token applies.
        """
        self.code = code
        self.token = token
        message = code.value
        if token is not None:
            message = "{} at token '{}'".format(message, token)
        super().__init__(message)
