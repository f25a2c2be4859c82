import os
import time
from pathlib import Path

import pytest

from starlaunch.core.models import LaunchCommand
from starlaunch.errors import LaunchError
from starlaunch.launcher import SubprocessLauncher, find_java

pytestmark = pytest.mark.skipif(os.name == "nt", reason="uses a POSIX shell script as java")


def _fake_java(tmp_path: Path, exit_code: int = 0) -> tuple[Path, Path]:
    args_file = tmp_path / "args.txt"
    script = tmp_path / "java"
    script.write_text(
        "#!/bin/sh\n"
        f"printf '%s\\n' \"$@\" > '{args_file}.tmp'\n"
        f"mv '{args_file}.tmp' '{args_file}'\n"
        f"exit {exit_code}\n",
        encoding="utf-8",
    )
    script.chmod(0o755)
    return script, args_file


def _command(spawn: bool) -> LaunchCommand:
    return LaunchCommand(
        classpath="lib/app.jar",
        class_name="com.example.Server",
        vm_arguments="-Xmx1g -Dname='a b'",
        application_arguments="-v classpath:app.cfg",
        spawn=spawn,
    )


def test_attached_launch_waits_and_returns_exit_code(tmp_path: Path) -> None:
    java, args_file = _fake_java(tmp_path, exit_code=3)

    result = SubprocessLauncher(java=str(java)).launch(_command(spawn=False))

    assert result.returncode == 3
    assert result.spawned is False
    assert args_file.read_text(encoding="utf-8").splitlines() == [
        "-Xmx1g",
        "-Dname=a b",
        "-cp",
        "lib/app.jar",
        "com.example.Server",
        "-v",
        "classpath:app.cfg",
    ]


def test_spawned_launch_returns_without_waiting(tmp_path: Path) -> None:
    java, args_file = _fake_java(tmp_path)

    launcher = SubprocessLauncher(java=str(java))
    result = launcher.launch(_command(spawn=True))

    assert result.spawned is True
    assert result.returncode is None
    assert isinstance(result.pid, int)
    (child,) = launcher.spawned
    assert child.pid == result.pid
    assert child.wait(timeout=10) == 0
    deadline = time.monotonic() + 10
    while not args_file.exists() and time.monotonic() < deadline:
        time.sleep(0.05)
    assert "com.example.Server" in args_file.read_text(encoding="utf-8")


def test_launch_error_when_executable_cannot_start(tmp_path: Path) -> None:
    launcher = SubprocessLauncher(java=str(tmp_path / "no-such-java"))
    with pytest.raises(LaunchError, match="Unable to start"):
        launcher.launch(_command(spawn=False))


def test_find_java_prefers_explicit_then_java_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    bin_dir = tmp_path / "jdk" / "bin"
    bin_dir.mkdir(parents=True)
    (bin_dir / "java").write_text("", encoding="utf-8")

    assert find_java("/opt/java") == "/opt/java"
    assert find_java(environ={"JAVA_HOME": str(tmp_path / "jdk")}) == str(bin_dir / "java")

    monkeypatch.setattr("starlaunch.launcher.shutil.which", lambda name: None)
    with pytest.raises(LaunchError, match="JAVA_HOME"):
        find_java(environ={})
