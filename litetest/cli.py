"""CLI entry point for litetest.

    litetest run <target> [options]
    python -m litetest list <target> [options]
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource

from .config import DriverConfig, load_config
from .discovery.paths import strip_prefix
from .reporting import JsonReporter
from .runner import TestDriver

log = logging.getLogger("litetest")


def output_error(message: str, as_json: bool = False, **extra) -> None:
    """Report a CLI-level error on the right channel."""
    if as_json:
        output = {
            "success": False,
            "command": "test",
            "data": extra or None,
            "message": message,
        }
        click.echo(json.dumps(output, ensure_ascii=False))
    else:
        click.echo(f"Error: {message}", err=True)


def _build_driver(
    project_root: Path,
    config_path: Optional[Path],
    src: Optional[str],
    root: Optional[str],
    as_json: bool,
) -> TestDriver:
    try:
        config = load_config(config_path, project_root)
    except (FileNotFoundError, ValueError) as e:
        output_error(f"Failed to load config: {e}", as_json)
        sys.exit(2)
    return TestDriver(src, root, project_root=project_root, config=config)


def _common_options(func):
    options = [
        click.argument("target", default=""),
        click.option("--project-root", type=click.Path(file_okay=False, path_type=Path),
                     default=None, help="Project base directory (default: cwd)."),
        click.option("--src", default=None, help="Path from the project root to the source root."),
        click.option("--root", "local_test_root", default=None,
                     help="Dotted package prefix applied to the target."),
        click.option("--recurse/--no-recurse", default=False,
                     help="Scan sub-packages (default: from config)."),
        click.option("--scan-unmarked", is_flag=True, default=False,
                     help="Scan classes without @lite_class too."),
        click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
                     default=None, help="YAML config file (default: litetest.yaml)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _option_or_config(name: str, value: bool, configured: bool) -> bool:
    """Use the command-line value only when it was given explicitly."""
    source = click.get_current_context().get_parameter_source(name)
    if source is ParameterSource.DEFAULT:
        return configured
    return value


def _require_marker(config: DriverConfig, scan_unmarked: bool) -> bool:
    if scan_unmarked:
        return False
    return config.require_type_marker


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log discovery and execution details.")
@click.version_option(package_name="litetest")
def cli(verbose: bool) -> None:
    """litetest - a minimal marker-based unit test runner."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@_common_options
@click.option("--full-trace/--short-trace", default=False,
              help="Print complete traces for failures (default: from config).")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON report instead of text.")
@click.option("--save-report", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Also save the JSON report to this file.")
def run(
    target: str,
    project_root: Optional[Path],
    src: Optional[str],
    local_test_root: Optional[str],
    recurse: bool,
    scan_unmarked: bool,
    config_path: Optional[Path],
    full_trace: bool,
    as_json: bool,
    save_report: Optional[Path],
) -> None:
    """Discover, run and report the tests under TARGET."""
    driver = _build_driver(project_root or Path.cwd(), config_path, src, local_test_root, as_json)
    full_trace = _option_or_config("full_trace", full_trace, driver.config.full_trace)
    recurse = _option_or_config("recurse", recurse, driver.config.recurse)

    driver.queue(target, recurse, _require_marker(driver.config, scan_unmarked))
    summary = driver.execute()

    reporter = JsonReporter()
    report = reporter.generate(summary, target=target, full_trace=full_trace)
    report_path = None
    if save_report:
        report_path = str(reporter.save(report, save_report))
        log.info("Report saved: %s", report_path)

    if as_json:
        click.echo(json.dumps(reporter.generate_cli_output(report, report_path), ensure_ascii=False))
    else:
        driver.report(full_trace)
    driver.reset()

    if not summary.all_passed:
        sys.exit(1)


@cli.command(name="list")
@_common_options
def list_tests(
    target: str,
    project_root: Optional[Path],
    src: Optional[str],
    local_test_root: Optional[str],
    recurse: bool,
    scan_unmarked: bool,
    config_path: Optional[Path],
) -> None:
    """List the tests under TARGET without running them."""
    driver = _build_driver(project_root or Path.cwd(), config_path, src, local_test_root, False)
    recurse = _option_or_config("recurse", recurse, driver.config.recurse)
    driver.queue(target, recurse, _require_marker(driver.config, scan_unmarked))

    for unit in driver.units:
        name = strip_prefix(unit.class_name, driver.local_test_root)
        req = f" [{unit.req_id}]" if unit.req_id else ""
        click.echo(f"{name}.{unit.method_name}{req}")
    click.echo(f"{len(driver.units)} tests found.")


def main() -> None:
    """Main CLI entry point."""
    cli(prog_name="litetest")


if __name__ == "__main__":
    main()
