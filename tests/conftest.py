import pytest


class FixedRandom:
    """Random source stub returning queued randint results."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def fixed_random():
    return FixedRandom
