# tests/fixtures/generators.py
import threading

import requests


class StubGenerator:
    """Records every prompt and answers with a fixed text."""

    def __init__(self, text="Generated copy"):
        self.text = text
        self.calls = []

    def generate(self, prompt, *, model):
        self.calls.append((prompt, model))
        return self.text


class FailingGenerator:
    def __init__(self, exc=None):
        self.exc = exc or requests.ConnectionError("network down")

    def generate(self, prompt, *, model):
        raise self.exc


class BlockingGenerator:
    """Holds the call open until `release` is set, to simulate a slow service."""

    def __init__(self, text="slow copy"):
        self.text = text
        self.started = threading.Event()
        self.release = threading.Event()

    def generate(self, prompt, *, model):
        self.started.set()
        self.release.wait(timeout=5)
        return self.text
