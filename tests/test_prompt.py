"""
Tests for the console prompts and their result types.
"""

import io

from force_layout.prompt import (
    Failure,
    InputExhausted,
    Success,
    prompt_for_duration,
    prompt_for_file,
    prompt_yes_no,
    welcome,
)


def streams(text):
    return {"stdin": io.StringIO(text), "stdout": io.StringIO(), "stderr": io.StringIO()}


class TestPromptForFile:
    """Tests for prompt_for_file()."""

    def test_existing_file(self, tmp_path):
        """A readable file is returned."""
        path = tmp_path / "g.txt"
        path.write_text("1\n")
        s = streams(f"{path}\n")

        result = prompt_for_file(**s)

        assert result == Success(path)
        assert result.ok
        assert "file name" in s["stdout"].getvalue()

    def test_reprompts_until_valid(self, tmp_path):
        """Empty answers and missing files are re-asked."""
        path = tmp_path / "g.txt"
        path.write_text("1\n")
        s = streams(f"\n{tmp_path / 'nope.txt'}\n{path}\n")

        result = prompt_for_file(reprompt="again", **s)

        assert result.ok
        assert s["stderr"].getvalue().count("again") == 2

    def test_end_of_input(self):
        """Exhausted input is a Failure, not an exception."""
        result = prompt_for_file(**streams(""))

        assert isinstance(result, Failure)
        assert not result.ok
        assert isinstance(result.error, InputExhausted)


class TestPromptForDuration:
    """Tests for prompt_for_duration()."""

    def test_number(self):
        """A number is parsed."""
        assert prompt_for_duration(**streams("2.5\n")) == Success(2.5)

    def test_reprompts_on_garbage(self):
        """Garbage and trailing text are re-asked."""
        s = streams("abc\n3 seconds\n4\n")

        assert prompt_for_duration(reprompt="bad", **s) == Success(4.0)
        assert s["stderr"].getvalue().count("bad") == 2

    def test_rejects_non_finite(self):
        """nan and inf are not durations."""
        result = prompt_for_duration(**streams("nan\ninf\n"))

        assert isinstance(result, Failure)

    def test_negative_allowed(self):
        """Negative numbers are passed through."""
        assert prompt_for_duration(**streams("-1\n")) == Success(-1.0)


class TestPromptYesNo:
    """Tests for prompt_yes_no()."""

    def test_yes(self):
        """Anything starting with y means yes."""
        assert prompt_yes_no(**streams("Yes please\n")) == Success(True)

    def test_no(self):
        """Anything starting with n means no."""
        assert prompt_yes_no(**streams("n\n")) == Success(False)

    def test_reprompts(self):
        """Other answers, including empty ones, are re-asked."""
        s = streams("\nmaybe\ny\n")

        assert prompt_yes_no(reprompt="y or n", **s) == Success(True)
        assert s["stderr"].getvalue().count("y or n") == 2

    def test_end_of_input(self):
        """Exhausted input is a Failure."""
        assert not prompt_yes_no(**streams("\n")).ok


class TestWelcome:
    """Tests for the banner."""

    def test_banner(self):
        """The banner describes the program."""
        out = io.StringIO()
        welcome(out)

        assert "force-directed" in out.getvalue()
