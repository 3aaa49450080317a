import pytest
from click.testing import CliRunner

from password_strength.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env={"COLUMNS": "200"})


def test_check_passing_password(runner):
    result = runner.invoke(cli, ["check", "Ab1!Cd2@"])

    assert result.exit_code == 0, result.output
    assert "Password satisfies all rules" in result.output


def test_check_failing_password(runner):
    result = runner.invoke(cli, ["check", "abc"])

    assert result.exit_code == 1
    assert "=> Password should contain at least 4 characters (3 found)!" in (
        result.output
    )
    assert "lower case" not in result.output


def test_check_with_preset_and_username(runner):
    result = runner.invoke(
        cli, ["check", "--preset", "normal", "--username", "alice", "Alice1234"]
    )

    assert result.exit_code == 1
    assert "Password cannot contain the username" in result.output


def test_check_prompts_for_password(runner):
    result = runner.invoke(cli, ["check", "--preset", "simple"], input="ab1\n")

    assert result.exit_code == 1
    assert "Password should contain at least 6 characters (3 found)!" in (
        result.output
    )


def test_check_unknown_preset(runner):
    result = runner.invoke(cli, ["check", "--preset", "extreme", "abc"])

    assert result.exit_code == 64
    assert "Invalid preset 'extreme'" in result.output


def test_config_file(runner, tmp_path):
    fn = tmp_path / "config.yaml"
    fn.write_text("preset: simple\nmin_length: 3\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "ab1"])

    assert result.exit_code == 0, result.output


def test_config_file_with_presets_source(runner, tmp_path, presets_file):
    fn = tmp_path / "config.yaml"
    fn.write_text("preset: relaxed\npresets_source: %s\n" % presets_file)

    result = runner.invoke(cli, ["-c", str(fn), "check", "abcde"])

    assert result.exit_code == 0, result.output


def test_invalid_config_file(runner, tmp_path):
    fn = tmp_path / "config.yaml"
    fn.write_text("min_length: -1\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 64
    assert "Validation failed for configuration file" in result.output


def test_malformed_config_file(runner, tmp_path):
    fn = tmp_path / "config.yaml"
    fn.write_text("preset: [simple\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 64
    assert "Decoding failed for configuration file" in result.output


def test_impossible_configuration(runner, tmp_path):
    fn = tmp_path / "config.yaml"
    fn.write_text("max_length: 4\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 64
    assert "Validation is impossible!" in result.output


def test_environment_settings(runner):
    result = runner.invoke(
        cli, ["check", "ab1"], env={"PASSWORD_STRENGTH_PRESET": "simple"}
    )

    assert result.exit_code == 1
    assert "at least 6 characters" in result.output


def test_presets(runner):
    result = runner.invoke(cli, ["presets"])

    assert result.exit_code == 0, result.output
    for name in ("simple", "normal", "fair", "medium", "strong"):
        assert name in result.output


def test_presets_ignores_field_overrides(runner):
    result = runner.invoke(
        cli, ["presets"], env={"PASSWORD_STRENGTH_MAX_LENGTH": "4"}
    )

    assert result.exit_code == 0, result.output
    assert "strong" in result.output


def test_presets_from_source(runner, tmp_path, presets_file):
    fn = tmp_path / "config.yaml"
    fn.write_text("presets_source: %s\n" % presets_file)

    result = runner.invoke(cli, ["-c", str(fn), "presets"])

    assert result.exit_code == 0, result.output
    assert "relaxed" in result.output
    assert "strong" not in result.output


def test_invalid_environment_settings(runner):
    result = runner.invoke(
        cli, ["check", "abc"], env={"PASSWORD_STRENGTH_MIN_LENGTH": "-1"}
    )

    assert result.exit_code == 64
    assert "Invalid environment settings" in result.output


def test_config_file_must_be_a_mapping(runner, tmp_path):
    fn = tmp_path / "config.yaml"
    fn.write_text("- simple\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 64
    assert "Validation failed for configuration file" in result.output
