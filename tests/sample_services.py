"""Importable classes used by wiring and CLI tests."""


class Logger:
    pass


class Net:
    def __init__(self, logger):
        self.logger = logger


class Volleyball:
    def __init__(self, net):
        self.net = net


class Broken:
    def __init__(self):
        raise RuntimeError("boom")


NOT_CALLABLE = 42
