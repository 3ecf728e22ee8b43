import random

from typer.testing import CliRunner

from informal.cli import STREAM_CLOSED_EXIT_CODE, app, secret_number

runner = CliRunner()


def test_no_command_prints_help():
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "ask" in result.output
    assert "confirm" in result.output


def test_ask_retries_until_value_is_in_bounds():
    result = runner.invoke(app, ["ask", "Enter age: ", "--type", "uint", "--max", "119"], input="abc\n200\n45\n")

    assert result.exit_code == 0
    assert result.stdout.rstrip().endswith("45")
    assert "Error: Input should be a valid integer" in result.output
    assert "Error: value must be at most 119" in result.output


def test_ask_custom_messages():
    result = runner.invoke(
        app,
        [
            "ask",
            "Enter age: ",
            "--type",
            "int",
            "--min",
            "0",
            "--type-error-message",
            "Numbers only",
            "--validator-error-message",
            "Too young",
        ],
        input="x\n-3\n9\n",
    )

    assert result.exit_code == 0
    assert result.stdout.rstrip().endswith("9")
    assert "Numbers only" in result.output
    assert "Too young" in result.output


def test_ask_uses_default_on_empty_answer():
    result = runner.invoke(app, ["ask", "Years: ", "--type", "int", "--default", "7"], input="\n")

    assert result.exit_code == 0
    assert result.stdout.rstrip().endswith("7")


def test_ask_rejects_unknown_type():
    result = runner.invoke(app, ["ask", "Value: ", "--type", "complex"])

    assert result.exit_code == 2


def test_ask_rejects_bounds_on_text():
    result = runner.invoke(app, ["ask", "Name: ", "--min", "1"])

    assert result.exit_code == 2


def test_ask_rejects_invalid_default():
    result = runner.invoke(app, ["ask", "Years: ", "--type", "int", "--default", "many"])

    assert result.exit_code == 2


def test_ask_closed_stream_exit_code():
    result = runner.invoke(app, ["ask", "Enter age: ", "--type", "int"], input="")

    assert result.exit_code == STREAM_CLOSED_EXIT_CODE
    assert "Input stream closed" in result.output


def test_confirm_yes_exits_zero():
    result = runner.invoke(app, ["confirm", "Continue?"], input="yes\n")

    assert result.exit_code == 0


def test_confirm_no_exits_one_after_custom_message():
    result = runner.invoke(app, ["confirm", "Continue?", "--message", "Say yes or no"], input="maybe\nno\n")

    assert result.exit_code == 1
    assert result.output.count("Say yes or no") == 1


def test_confirm_default_answer():
    result = runner.invoke(app, ["confirm", "Continue?", "--default", "yes"], input="\n")

    assert result.exit_code == 0


def test_confirm_rejects_invalid_default():
    result = runner.invoke(app, ["confirm", "Continue?", "--default", "sometimes"])

    assert result.exit_code == 2


def test_guess_game_round():
    number = secret_number(random.Random(7))

    result = runner.invoke(app, ["guess", "--seed", "7"], input=f"abc\n3\n{number}\nmaybe\nno\n")

    assert result.exit_code == 0
    assert "Please enter a valid guess!" in result.output
    assert "Please enter a number divisible by two" in result.output
    assert "You got it!" in result.output
    assert f"The number was: {number}" in result.output
    assert "I asked a simple question..." in result.output


def test_guess_stops_when_input_runs_out():
    result = runner.invoke(app, ["guess", "--seed", "7"], input="")

    assert result.exit_code == STREAM_CLOSED_EXIT_CODE


def test_verbose_flag_logs_transitions():
    result = runner.invoke(app, ["--verbose", "ask", "n: ", "--type", "int"], input="x\n1\n")

    assert result.exit_code == 0
    assert "parsing failed" in result.output
