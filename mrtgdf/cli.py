"""
Command-line interface for mrtgdf.

Prints four lines for MRTG: block usage percent, inode usage percent, '-',
and the host name. When PATH is not mounted the last stats seen while it was
mounted are reported instead.
"""

import logging
from pathlib import Path
from typing import List, Optional

import click
from pydantic import ValidationError

from mrtgdf import __version__
from mrtgdf.cache import CacheStore
from mrtgdf.config import CacheConfig, get_settings
from mrtgdf.exceptions import CacheIOError, CacheMissError, ConfigError, MrtgdfError, OutputError
from mrtgdf.models import Unknown
from mrtgdf.provider import StatsProvider
from mrtgdf.report import hostname, render, report_lines, unknown_lines

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class ReportCommand(click.Command):
    """Command whose usage errors exit with status 1."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = EXIT_FAILURE
            raise


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


def _load_settings():
    try:
        return get_settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from e


def _emit(lines: List[str]) -> None:
    try:
        click.echo(render(lines), nl=False)
    except OSError as e:
        raise OutputError.from_os_error("writing", "stdout", e) from e


@click.command(
    'mrtgdf',
    cls=ReportCommand,
    context_settings={'help_option_names': ['-h', '--help']},
)
@click.version_option(__version__, '-V', '--version', prog_name='mrtgdf')
@click.option(
    '--cache-dir',
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help='Directory for cached statistics (default: ~/.mrtgdf)'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.argument('path')
def cli(path: str, cache_dir: Optional[Path], verbose: bool):
    """
    Report filesystem usage of PATH in MRTG format.

    If PATH is a mount point its statistics are read and cached. If it is
    not currently mounted, the statistics cached the last time it was are
    reported. With no cached statistics, UNKNOWN is reported and the exit
    status is 1.

    Examples:

        \b
        # Report usage of the root filesystem
        mrtgdf /

        \b
        # Removable disk that may be unplugged
        mrtgdf /mnt/backup
    """
    try:
        settings = _load_settings()
        _configure_logging(settings.log_level, verbose)

        store = CacheStore(CacheConfig.from_settings(settings, cache_dir))
        provider = StatsProvider(store)

        result = provider.get_stats(path)
        host = hostname()
        if isinstance(result, Unknown):
            _emit(unknown_lines(host))
            error_cls = CacheIOError if result.io_error else CacheMissError
            raise error_cls(result.reason, details={"path": path})
        _emit(report_lines(result.stats, host))
    except MrtgdfError as e:
        click.echo(f"ERROR: {e.message}", err=True)
        logger.debug(f"{e.error_code}: {e.details}")
        raise SystemExit(e.exit_code)


def main() -> None:
    """Console script entry point."""
    cli(prog_name='mrtgdf')


if __name__ == '__main__':
    main()
