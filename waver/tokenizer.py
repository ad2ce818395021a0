# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

import os
from enum import Enum

from waver.config import Constant
from waver.errors import LoadError, LoadErrorCode


SENTINEL = Constant.SENTINEL.value


class State(Enum):
    UNLOADED = 0
    LOADED = 1
    TOKENIZED = 2


def read_file(path):
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise LoadError(LoadErrorCode.NOT_FOUND, os.fspath(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(LoadErrorCode.UNREADABLE, os.fspath(path)) from e


class Tokenizer:
    def __init__(self):
        """
        Tokenizer splits VCD text into whitespace delimited tokens and hands
        them out through a cursor. It is loaded once and tokenized once.

        The tokenizer keeps the whole source text for as long as it lives.
        Tokens are str copies, so nothing built from them depends on the
        tokenizer staying around.
        """
        self.content = None
        self.tokens = list()
        self.cursor = 0
        self.state = State.UNLOADED

    def load(self, source):
        """
        Sets the text to tokenize.

        source : os.PathLike or str
            A path is read from disk, a str is taken as the VCD text itself
        """
        if self.state is not State.UNLOADED:
            raise LoadError(LoadErrorCode.ALREADY_LOADED)
        if isinstance(source, os.PathLike):
            self.content = read_file(source)
        elif isinstance(source, str):
            self.content = source
        else:
            raise Exception(
                "source must be a path or a str, got {}".format(type(source))
            )
        self.state = State.LOADED

    def tokenize(self):
        if self.state is State.TOKENIZED:
            raise LoadError(LoadErrorCode.ALREADY_TOKENIZED)
        if self.state is State.UNLOADED or len(self.content) == 0:
            raise LoadError(LoadErrorCode.EMPTY_CONTENT)
        terminators = Constant.LINE_TERMINATORS.value
        text = self.content.translate(
            str.maketrans(terminators, " " * len(terminators))
        )
        self.tokens = [token for token in text.split(" ") if token != ""]
        self.tokens.append(SENTINEL)
        self.cursor = 0
        self.state = State.TOKENIZED

    def front(self):
        if len(self.tokens) == 0:
            raise Exception("front() called before tokenize()")
        return self.tokens[0]

    def back(self):
        if len(self.tokens) == 0:
            raise Exception("back() called before tokenize()")
        return self.tokens[-1]

    def current(self):
        if self.cursor < len(self.tokens):
            return self.tokens[self.cursor]
        return SENTINEL

    def consume(self, step=1):
        """Returns the token under the cursor, then moves the cursor by step."""
        if self.cursor >= len(self.tokens):
            raise Exception(
                "cursor {} out of bounds for {} tokens".format(
                    self.cursor, len(self.tokens)
                )
            )
        token = self.tokens[self.cursor]
        self.cursor += step
        return token

    def __len__(self):
        return len(self.tokens)

    def __repr__(self):
        return "Tokenizer({}, {}/{})".format(
            self.state.name, self.cursor, len(self.tokens)
        )
