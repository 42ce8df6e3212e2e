"""Tests for callback arity adaptation."""

from value_collections.sequences.callbacks import adapt_callback, positional_capacity


class Counter:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def record(self, element, index):
        self.calls.append((element, index))
        return True


class TestPositionalCapacity:
    """Tests for counting accepted positional arguments."""

    def test_lambdas(self):
        """Tests plain positional parameters."""
        assert positional_capacity(lambda: None, fallback=1) == 0
        assert positional_capacity(lambda a: a, fallback=1) == 1
        assert positional_capacity(lambda a, b, c: a, fallback=1) == 3

    def test_keyword_only_parameters_are_not_counted(self):
        """Tests that keyword-only parameters receive nothing positionally."""
        assert positional_capacity(lambda a, *, b=1: a, fallback=1) == 1

    def test_var_positional(self):
        """Tests that *args means any number."""
        assert positional_capacity(lambda *args: args, fallback=1) is None

    def test_bound_method(self):
        """Tests that self is not counted."""
        assert positional_capacity(Counter().record, fallback=1) == 2


class TestAdaptCallback:
    """Tests for trimming arguments to what the callback accepts."""

    def test_trims_trailing_arguments(self):
        """Tests a one-argument callback fed the full shape."""
        adapted = adapt_callback(lambda element: element * 2, max_args=3)
        assert adapted(4, 0, (4,)) == 8

    def test_passes_everything_when_accepted(self):
        """Tests that full-shape callbacks are returned unchanged."""

        def full(element, index, snapshot):
            return (element, index, snapshot)

        assert adapt_callback(full, max_args=3) is full
        assert adapt_callback(lambda *args: args, max_args=3)(1, 2, 3) == (1, 2, 3)

    def test_bound_methods(self):
        """Tests a method taking element and index."""
        counter = Counter()
        adapted = adapt_callback(counter.record, max_args=3)

        adapted("a", 0, ("a",))

        assert counter.calls == [("a", 0)]

    def test_zero_argument_callback(self):
        """Tests a callback that ignores its arguments."""
        adapted = adapt_callback(lambda: "called", max_args=3)
        assert adapted(1, 0, (1,)) == "called"
