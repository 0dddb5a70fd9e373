# tests/scripted_random.py
class ScriptedRandom:
    """
    Stand-in for random.Random that replays a fixed stream
    - randrange returns the next scripted int (checked against the range)
    - random returns the next scripted float
    - once the script runs out, randrange returns the lowest value of the
      range and random returns `default_float`
    """

    def __init__(self, values, default_float=0.0):
        self.values = list(values)
        self.default_float = default_float
        self.calls = []

    def randrange(self, start, stop=None):
        if stop is None:
            start, stop = 0, start
        if self.values:
            value = self.values.pop(0)
        else:
            value = start
        assert start <= value < stop, f"scripted {value} not in range({start}, {stop})"
        self.calls.append(("randrange", start, stop, value))
        return value

    def random(self):
        value = self.values.pop(0) if self.values else self.default_float
        assert 0.0 <= value < 1.0
        self.calls.append(("random", value))
        return value
