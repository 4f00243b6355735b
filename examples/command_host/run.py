"""Drive tests from a prompt the way an interactive host would.

    $ python examples/command_host/run.py
    > /demo-test slow
"""
import click

from simpletester import CommandRegistry, ManualScheduler, TestRunner, create_test_command
from simpletester.self_tests import create_self_test_command


def main() -> None:
    scheduler = ManualScheduler()
    runner = TestRunner(scheduler=scheduler)
    commands = CommandRegistry()
    pending_reports = []

    def slow_test(report):
        # reported on a later prompt turn
        pending_reports.append(report)

    tests = {
        "fast_passes": lambda report: report(True),
        "slow_passes": slow_test,
        "fails": lambda report: report(False),
    }
    create_test_command("/demo-test", "DEMO_TEST", tests, runner=runner, registry=commands)
    create_self_test_command(runner, registry=commands)

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line in {"/quit", "/exit"}:
            break
        if line:
            try:
                commands.dispatch(line)
            except (KeyError, ValueError) as exc:
                click.echo(f"error: {exc.args[0]}")
                continue
        while pending_reports:
            pending_reports.pop(0)(True)
        scheduler.run_until_idle()


if __name__ == "__main__":
    main()
