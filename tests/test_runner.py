from pathlib import Path

from starlaunch import COMMAND_MONITOR_SECRET, LaunchParameters, prepare, run_server, start_server
from starlaunch.core.interfaces import ProcessLauncher, PropertiesLoader
from starlaunch.core.models import LaunchCommand, LaunchResult


class RecordingLauncher(ProcessLauncher):
    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.commands: list[LaunchCommand] = []

    def launch(self, command: LaunchCommand) -> LaunchResult:
        self.commands.append(command)
        if command.spawn:
            return LaunchResult(pid=4242, spawned=True)
        return LaunchResult(pid=4242, returncode=self.returncode)


class DictLoader(PropertiesLoader):
    def __init__(self, resources: dict[str, dict[str, str]]) -> None:
        self.resources = resources

    def load_properties(self, name: str) -> dict[str, str]:
        return self.resources[name]


def test_run_server_resolves_properties_from_classpath(tmp_path: Path) -> None:
    resource = tmp_path / "classes" / "myserver" / "starling-maven-plugin.properties"
    resource.parent.mkdir(parents=True)
    resource.write_text(
        "server.main.configFile=custom.cfg\nserver.main.startupLogging=ERROR\n",
        encoding="iso-8859-1",
    )
    launcher = RecordingLauncher(returncode=7)

    code = run_server(
        LaunchParameters(config="myserver", configFile="raw.cfg"),
        classpath=str(tmp_path / "classes"),
        launcher=launcher,
        exists=lambda path: False,
    )

    assert code == 7
    (command,) = launcher.commands
    assert command.application_arguments == "-q classpath:custom.cfg"
    assert command.classpath == str(tmp_path / "classes")
    assert command.spawn is False
    assert COMMAND_MONITOR_SECRET not in command.vm_arguments


def test_start_server_spawns_with_monitor_secret(tmp_path: Path) -> None:
    launcher = RecordingLauncher()

    pid = start_server(
        LaunchParameters(configFile="file:app.cfg"),
        classpath=str(tmp_path),
        launcher=launcher,
    )

    assert pid == 4242
    (command,) = launcher.commands
    assert command.spawn is True
    assert command.vm_arguments.endswith(COMMAND_MONITOR_SECRET)
    assert command.application_arguments == "file:app.cfg"


def test_prepare_builds_command_without_launching(tmp_path: Path) -> None:
    command = prepare(
        LaunchParameters(config="srv", configFile="app.cfg"),
        spawn=False,
        classpath=str(tmp_path),
        loader=DictLoader({"srv/starling-maven-plugin.properties": {"server.main.vmArgs": "-Dx=1"}}),
        exists=lambda path: True,
    )

    assert command.application_arguments == "file:app.cfg"
    assert command.vm_arguments.endswith("-Dx=1")
    assert command.classpath == str(tmp_path)
