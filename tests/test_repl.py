"""Tests for the command loop."""

import io

from groupcalc.config import Settings
from groupcalc.repl import HELP_LINES, Repl, format_elements


class Transcript:
    """Collects echoed lines, joining partial writes made with nl=False."""

    def __init__(self):
        self.lines = []
        self._pending = ""

    def __call__(self, message: str = "", nl: bool = True) -> None:
        self._pending += message
        if nl:
            self.lines.append(self._pending)
            self._pending = ""


def make_repl():
    transcript = Transcript()
    return Repl(echo=transcript), transcript


class TestDispatch:
    def test_add_reports_each_value(self):
        repl, out = make_repl()
        assert repl.handle("add 1 2")
        assert out.lines == ["Element added: 1", "Element added: 2"]
        assert repl.session.elements == (1, 2)

    def test_add_mixed_tokens(self):
        """Test that invalid tokens are reported while valid ones are inserted."""
        repl, out = make_repl()
        repl.handle("add 4 x 5")
        assert "Invalid input 'x', please enter an integer." in out.lines
        assert repl.session.elements == (4, 5)

    def test_add_reports_tokens_in_input_order(self):
        """Test that mixed valid and invalid tokens are reported in the order typed."""
        repl, out = make_repl()
        repl.handle("add 1 x 2")
        assert out.lines == [
            "Element added: 1",
            "Invalid input 'x', please enter an integer.",
            "Element added: 2",
        ]

    def test_add_same_value_twice(self):
        repl, _ = make_repl()
        repl.handle("add 5 5")
        assert repl.session.elements == (5,)

    def test_add_without_arguments(self):
        repl, out = make_repl()
        repl.handle("add")
        assert out.lines == ["Usage: add <int> [<int> ...]"]

    def test_identity(self):
        repl, out = make_repl()
        repl.handle("identity 0")
        assert out.lines == ["Identity set: 0"]
        assert repl.session.identity == 0

    def test_identity_invalid_keeps_previous(self):
        repl, out = make_repl()
        repl.handle("identity 1")
        repl.handle("identity one")
        repl.handle("identity")
        assert out.lines[1] == "Invalid input 'one', please enter an integer."
        assert out.lines[2] == "Missing value, please enter an integer."
        assert repl.session.identity == 1

    def test_list_empty(self):
        repl, out = make_repl()
        repl.handle("list")
        assert out.lines == ["Current elements: {}", "Identity element not set."]

    def test_list_populated(self):
        repl, out = make_repl()
        repl.handle("add 2 0 1")
        repl.handle("identity 0")
        out.lines.clear()
        repl.handle("list")
        assert out.lines == ["Current elements: {0, 1, 2}", "Identity element: 0"]

    def test_help(self):
        repl, out = make_repl()
        repl.handle("help")
        assert out.lines == HELP_LINES

    def test_unknown_command(self):
        repl, out = make_repl()
        assert repl.handle("frobnicate 3")
        assert out.lines == ["Unknown command. Type 'help' for available commands."]

    def test_blank_line_ignored(self):
        repl, out = make_repl()
        assert repl.handle("   ")
        assert out.lines == []

    def test_exit_stops(self):
        repl, _ = make_repl()
        assert repl.handle("exit") is False


class TestCreate:
    def test_requires_identity(self):
        repl, out = make_repl()
        repl.handle("add 0 1")
        out.lines.clear()
        repl.handle("create")
        assert out.lines == ["Identity element not set."]

    def test_success(self):
        repl, out = make_repl()
        repl.handle("add 0 1 2")
        repl.handle("identity 0")
        out.lines.clear()
        repl.handle("create")
        assert out.lines == [
            "Group created: order 3, identity 0, modulus 3",
            "  Elements: {0, 1, 2}",
            "  Inverses: 0<->0, 1<->2, 2<->1",
        ]

    def test_lists_every_failed_axiom(self):
        """Test that a failing candidate prints one line per violated axiom."""
        repl, out = make_repl()
        repl.handle("add 1 2 3")
        repl.handle("identity 0")
        out.lines.clear()
        repl.handle("create")
        assert out.lines == [
            "Error creating group:",
            "  Identity membership unsatisfied: identity 0 is not an element of the set",
            "  Closure unsatisfied: 1 + 2 (mod 3) = 0, which is not in the set",
            "  Identity unsatisfied: 3 + 0 (mod 3) = 0, expected 3",
        ]

    def test_empty_set(self):
        repl, out = make_repl()
        repl.handle("identity 0")
        out.lines.clear()
        assert repl.handle("create")
        assert out.lines[0] == "Error creating group:"
        assert "Non-empty set unsatisfied" in out.lines[1]

    def test_session_continues_after_failure(self):
        repl, out = make_repl()
        repl.handle("add 1")
        repl.handle("identity 0")
        repl.handle("create")
        repl.handle("add 0")
        out.lines.clear()
        repl.handle("create")
        assert out.lines[0] == "Group created: order 2, identity 0, modulus 2"


class TestRun:
    def test_stops_at_exit(self):
        repl, out = make_repl()
        repl.run(io.StringIO("add 0\nexit\nadd 1\n"))
        assert repl.session.elements == (0,)

    def test_stops_at_end_of_input(self):
        repl, out = make_repl()
        repl.run(io.StringIO("add 0\n"))
        assert repl.session.elements == (0,)

    def test_prompt_uses_settings(self):
        transcript = Transcript()
        repl = Repl(settings=Settings(prompt="calc"), echo=transcript)
        repl.run(io.StringIO("exit\n"))
        assert transcript._pending == "calc> "


class TestFormatElements:
    def test_empty(self):
        assert format_elements(()) == "{}"

    def test_values(self):
        assert format_elements((-1, 0, 4)) == "{-1, 0, 4}"
