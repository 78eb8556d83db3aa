"""Unit tests for the authcore CLI."""

import json
import os

import pytest
from click.testing import CliRunner

from authcore.cli import cli
from authcore.core.config import get_settings
from authcore.domain.entities import PublicUser
from authcore.infrastructure.auth.token_codec import TokenCodec

SECRET = "test-secret-key-at-least-256-bits-long-for-security"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("AUTHCORE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AUTHCORE_SECRET_KEY", SECRET)
    monkeypatch.setenv("AUTHCORE_ENVIRONMENT", "testing")
    monkeypatch.setenv("AUTHCORE_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("AUTHCORE_PASSWORD_HASH_COST", "1")
    monkeypatch.setenv("AUTHCORE_PASSWORD_HASH_MEMORY_COST", "1024")
    monkeypatch.setenv("AUTHCORE_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "authcore" in result.output


def test_init_db(runner, tmp_path):
    result = runner.invoke(cli, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "Database initialized." in result.output
    assert (tmp_path / "cli.db").exists()


def test_hash_password(runner):
    result = runner.invoke(cli, ["hash-password", "--password", "secret1"])

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1].startswith("$argon2id$")


def test_hash_password_prompts(runner):
    result = runner.invoke(cli, ["hash-password"], input="secret1\nsecret1\n")

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1].startswith("$argon2id$")
    assert "secret1" not in result.output


def test_verify_token(runner):
    user = PublicUser(id="u1", email="a@x.com", name="A")
    token = TokenCodec.from_settings(get_settings()).issue(user.to_claims())
    get_settings.cache_clear()

    result = runner.invoke(cli, ["verify-token", token])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == user.to_claims()


def test_verify_token_invalid(runner):
    result = runner.invoke(cli, ["verify-token", "garbage"])

    assert result.exit_code == 1
    assert "Invalid token" in result.output


def test_missing_secret_reports_field(runner, monkeypatch):
    monkeypatch.delenv("AUTHCORE_SECRET_KEY")
    get_settings.cache_clear()

    result = runner.invoke(cli, ["hash-password", "--password", "secret1"])

    assert result.exit_code == 1
    assert "Invalid configuration: secret_key" in result.output
