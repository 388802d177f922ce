"""Capture tests that run real interpreters; skipped when one is not installed."""

import os
import shutil
import sys

import pytest

from shenv.capture import capture_env
from shenv.errors import ExecutionError, SnapshotParseError, SpawnError
from shenv.shell import posix_preset, powershell_preset, python_preset

FOO = "SHENV_TEST_FOO"
INHERITED = "SHENV_TEST_INHERITED"

requires_sh = pytest.mark.skipif(
    shutil.which("sh") is None or os.name == "nt", reason="needs a POSIX sh on PATH"
)


@pytest.fixture
def sh_config(snapshot_dir):
    return posix_preset(shutil.which("sh")).with_overrides(temp_dir=str(snapshot_dir))


@pytest.fixture(autouse=True)
def _clean_test_vars(monkeypatch):
    for name in (FOO, INHERITED, "PYTHONHOME", "PYTHONINSPECT"):
        monkeypatch.delenv(name, raising=False)


@requires_sh
class TestPosixShell:
    def test_noop_reports_nothing(self, sh_config):
        assert capture_env(":", sh_config) == {}

    def test_probing_is_idempotent(self, sh_config):
        assert capture_env("", sh_config) == {}
        assert capture_env("", sh_config) == {}

    def test_single_addition(self, sh_config):
        assert capture_env(f"export {FOO}=bar", sh_config) == {FOO: "bar"}

    def test_unexported_variable_is_not_environment(self, sh_config):
        assert capture_env(f"{FOO}=bar", sh_config) == {}

    def test_reset_to_same_value_is_not_reported(self, sh_config, monkeypatch):
        monkeypatch.setenv(FOO, "X")
        assert capture_env(f"export {FOO}=X", sh_config) == {}

    def test_overwrite_is_reported(self, sh_config, monkeypatch):
        monkeypatch.setenv(FOO, "X")
        assert capture_env(f"export {FOO}=Y", sh_config) == {FOO: "Y"}

    def test_removal_is_invisible(self, sh_config, monkeypatch):
        monkeypatch.setenv(FOO, "X")
        assert capture_env(f"unset {FOO}", sh_config) == {}

    def test_value_with_newlines_and_quotes(self, sh_config):
        script = f"{FOO}='line one\nit\"s two'\nexport {FOO}"
        assert capture_env(script, sh_config) == {FOO: 'line one\nit"s two'}

    def test_trailing_comment_does_not_eat_the_probe(self, sh_config):
        assert capture_env(f"export {FOO}=bar # no newline", sh_config) == {FOO: "bar"}

    def test_caller_environment_is_untouched(self, sh_config):
        capture_env(f"export {FOO}=bar", sh_config)
        assert FOO not in os.environ

    def test_failing_script_raises_and_cleans_up(self, sh_config, snapshot_dir):
        with pytest.raises(ExecutionError) as exc_info:
            capture_env("echo boom >&2; exit 3", sh_config)
        assert exc_info.value.returncode == 3
        assert "boom" in exc_info.value.stderr
        assert list(snapshot_dir.iterdir()) == []

    def test_silent_probe_failure_is_a_parse_error(self, sh_config, snapshot_dir):
        config = sh_config.with_overrides(snapshot=lambda target: ["true"])
        with pytest.raises(SnapshotParseError):
            capture_env(f"export {FOO}=bar", config)
        assert list(snapshot_dir.iterdir()) == []

    def test_missing_interpreter_is_spawn_error(self, sh_config, snapshot_dir):
        config = sh_config.with_overrides(shell="/nonexistent/bin/sh")
        with pytest.raises(SpawnError):
            capture_env("", config)
        assert list(snapshot_dir.iterdir()) == []

    def test_snapshots_removed_after_success(self, sh_config, snapshot_dir):
        capture_env(f"export {FOO}=bar", sh_config)
        assert list(snapshot_dir.iterdir()) == []

    def test_undecodable_value_from_script(self, sh_config):
        script = f"export {FOO}=\"$(printf 'a\\377b')\""
        assert capture_env(script, sh_config) == {FOO: "a\udcffb"}

    def test_undecodable_inherited_value_does_not_break_capture(self, sh_config, monkeypatch):
        monkeypatch.setenv(INHERITED, "x\udcffy")
        assert capture_env(f"export {FOO}=bar", sh_config) == {FOO: "bar"}

    def test_python_variables_set_by_script_are_captured(self, sh_config):
        script = "export PYTHONHOME=/nonexistent PYTHONINSPECT=1"
        assert capture_env(script, sh_config) == {
            "PYTHONHOME": "/nonexistent",
            "PYTHONINSPECT": "1",
        }

    def test_single_quote_in_composed_path_fails_predictably(self, sh_config, snapshot_dir):
        quoted_dir = snapshot_dir / "it's"
        quoted_dir.mkdir()
        config = sh_config.with_overrides(temp_dir=str(quoted_dir))
        with pytest.raises(ExecutionError):
            capture_env(f"export {FOO}=bar", config)
        assert list(quoted_dir.iterdir()) == []


@pytest.mark.parametrize("name", ["bash", "zsh"])
def test_bash_and_zsh(name, snapshot_dir):
    executable = shutil.which(name)
    if executable is None:
        pytest.skip(f"{name} not installed")
    config = posix_preset(executable).with_overrides(temp_dir=str(snapshot_dir))
    assert capture_env("true", config) == {}
    assert capture_env(f"export {FOO}=bar", config) == {FOO: "bar"}


def test_fish(snapshot_dir):
    executable = shutil.which("fish")
    if executable is None:
        pytest.skip("fish not installed")
    config = posix_preset(executable).with_overrides(temp_dir=str(snapshot_dir))
    assert capture_env(f"set -gx {FOO} bar", config).get(FOO) == "bar"


def test_powershell(snapshot_dir):
    executable = shutil.which("pwsh")
    if executable is None:
        pytest.skip("pwsh not installed")
    config = powershell_preset(executable).with_overrides(temp_dir=str(snapshot_dir))
    assert capture_env(f"$env:{FOO} = 'bar'", config).get(FOO) == "bar"
    assert list(snapshot_dir.iterdir()) == []


def test_python_host_instance(snapshot_dir):
    config = python_preset(sys.executable).with_overrides(temp_dir=str(snapshot_dir))
    script = f'import os\nos.environ["{FOO}"] = "bar"'
    assert capture_env(script, config) == {FOO: "bar"}
    assert capture_env("pass", config) == {}
