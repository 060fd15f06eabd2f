"""Tests for the command line interface."""

from click.testing import CliRunner

from profilegraph.cli import cli


def test_print_schema():
    result = CliRunner().invoke(cli, ["print-schema"])

    assert result.exit_code == 0, result.output
    assert "type Profile {" in result.output
    assert "createProfile(profile: ProfileInput!): Profile" in result.output


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert "0.1.0" in result.output
