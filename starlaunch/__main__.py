"""CLI entrypoint for launching a component server.

Usage:
    python -m starlaunch run --config-file server.ini [--classpath CP] [--log-level INFO]
    python -m starlaunch start --config myserver --classpath build/classes:lib/app.jar
    python -m starlaunch run --params launch.json --vm-args=-Dfoo=bar --vm-memory-args="-Xms1g -Xmx4g" --dry-run

Values that start with "-" must be given in "--flag=value" form.
"""

import argparse
import logging
import shlex
import sys
from pathlib import Path

from starlaunch import configure_logging
from starlaunch.configuration import load_parameters_file, merge_parameters
from starlaunch.core.models import LaunchParameters
from starlaunch.errors import StarlaunchError
from starlaunch.launcher import SubprocessLauncher
from starlaunch.runner import prepare, run_server, start_server

logger = logging.getLogger("starlaunch")


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--params", type=Path, help="JSON file with launch parameters")
    common.add_argument("--config", help="Classpath directory holding starling-maven-plugin.properties")
    common.add_argument("--class-name", dest="class_name", help="Server main class")
    common.add_argument("--config-file", dest="config_file", help="Server config file (file:/classpath: prefix optional)")
    common.add_argument("--startup-logging", dest="startup_logging", help="ERROR, WARN, INFO or DEBUG")
    common.add_argument("--server-logging", dest="server_logging", help="ERROR, WARN, INFO, DEBUG or a logback file")
    common.add_argument("--vm-memory-args", dest="vm_memory_args", help="JVM memory/GC arguments; use --vm-memory-args=-Xmx2g for values starting with -")
    common.add_argument("--vm-args", dest="vm_args", help="Additional JVM arguments; use --vm-args=-Dfoo=bar for values starting with -")
    common.add_argument("--classpath", "-cp", help="Runtime classpath (default: $STARLAUNCH_CLASSPATH, $CLASSPATH, .)")
    common.add_argument("--java", help="Path to the java executable (default: $JAVA_HOME/bin/java, PATH)")
    common.add_argument("--dry-run", action="store_true", help="Print the command instead of running it")
    common.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    common.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")

    parser = argparse.ArgumentParser(prog="starlaunch", description="Launch a component server JVM.")
    sub = parser.add_subparsers(dest="cmd", required=True)
    sub.add_parser("run", parents=[common], help="Run the server attached and wait for it")
    sub.add_parser("start", parents=[common], help="Spawn the server detached")
    return parser


def _dry_run(params: LaunchParameters, args: argparse.Namespace, spawn: bool) -> int:
    command = prepare(params, spawn=spawn, classpath=args.classpath)
    print(shlex.join(command.argv(args.java or "java")))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_format=args.json_logs)

    spawn = args.cmd == "start"
    try:
        params = load_parameters_file(args.params) if args.params else LaunchParameters()
        params = merge_parameters(
            params,
            {
                "config_dir": args.config,
                "class_name": args.class_name,
                "config_file": args.config_file,
                "startup_logging": args.startup_logging,
                "server_logging": args.server_logging,
                "vm_memory_args": args.vm_memory_args,
                "vm_args": args.vm_args,
            },
        )
        if args.dry_run:
            return _dry_run(params, args, spawn)
        launcher = SubprocessLauncher(java=args.java)
        if spawn:
            start_server(params, classpath=args.classpath, launcher=launcher)
            return 0
        return run_server(params, classpath=args.classpath, launcher=launcher)
    except StarlaunchError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
