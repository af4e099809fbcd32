"""
Command line entry points.

``bandsort`` is the upstream sort stage: it reads a table on stdin and writes
it back stably sorted by the last column. ``bandlib`` groups the pipeline
stages as sub-commands:

    bandlib sort    stable sort by the last column (same as ``bandsort``)
    bandlib label   sort, partition and append the band label column
    bandlib cuts    sort, partition and append each row's cut bound
    bandlib bands   replace an upstream cut column by band labels

Tables are read from stdin and written to stdout; the diagnostic trace and
log messages go to stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from bandlib import __version__
from bandlib.core.data.table import Column, TableError, read_table, write_table
from bandlib.core.utils.config import get_config
from bandlib.core.utils.logging import LOG_LEVELS, configure_logging, get_logger
from bandlib.core.utils.param_validation import ParamValidationError
from bandlib.core.utils.serialization import serialize_to_json
from bandlib.discretize.pipeline import CUT_COLUMN, DiscretizationError, DiscretizationResult, Discretizer
from bandlib.discretize.sorting import sort_table

logger = get_logger(__name__)

REPORT_VERSION = "1"

EXIT_OK = 0
EXIT_FAILURE = 1


def _column(text: str) -> Column:
    # 纯整数视为列下标（可为负），否则按列名处理
    try:
        return int(text)
    except ValueError:
        return text


def add_sort_flags(parser: argparse.ArgumentParser) -> None:
    """Mutually exclusive sort strategy selectors; merge sort when none is given."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-m", "--merge",
        dest="strategy", action="store_const", const="merge",
        help="stable merge sort (default)",
    )
    group.add_argument(
        "-a", "--argsort",
        dest="strategy", action="store_const", const="argsort",
        help="stable numpy argsort",
    )


def build_sort_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Stably sort a comma-separated table by its last column.",
    )
    add_sort_flags(parser)
    return parser


def _add_partition_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        type=_column,
        default=-1,
        help="target column name or index (default: last column)",
    )
    parser.add_argument("--cohen", type=float, default=None, help="effect size used to derive the minimum band range")
    parser.add_argument("--margin", type=float, default=None, help="cost multiplier applied to candidate cuts")
    parser.add_argument("--min-bin-size", type=int, default=None, help="minimum rows per band (default: floor(sqrt(n)))")
    parser.add_argument("--label-column", default=None, help="name of the generated label column")
    parser.add_argument("--trace", action="store_true", help="write the partition trace to stderr")
    parser.add_argument("--report", type=Path, default=None, help="write a JSON band summary to this path")
    add_sort_flags(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the ``bandlib`` parser with one sub-command per pipeline stage."""
    parser = argparse.ArgumentParser(
        prog="bandlib",
        description="Discretize a numeric column into variance-minimising bands.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: BANDLIB_LOG_LEVEL or INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="stable sort by the last column")
    add_sort_flags(sort)

    label = commands.add_parser("label", help="append band labels")
    _add_partition_options(label)
    label.add_argument("--best-rest", action="store_true", help="label the uppermost band 'best' and the others 'rest'")

    cuts = commands.add_parser("cuts", help="append each row's partition cut bound")
    _add_partition_options(cuts)
    cuts.add_argument("--cut-column", default=CUT_COLUMN, help="name of the appended cut column")

    bands = commands.add_parser("bands", help="replace an upstream cut column by band labels")
    _add_partition_options(bands)
    bands.add_argument("--cut-column", default=CUT_COLUMN, help="name of the upstream cut column")
    return parser


def _write_report(result: DiscretizationResult, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_to_json(result, version=REPORT_VERSION, indent=2), encoding="utf-8")
    logger.info("wrote band report to %s", path)


def _discretizer(args: argparse.Namespace, stderr: TextIO) -> Discretizer:
    trace = (lambda line: stderr.write(line + "\n")) if args.trace else None
    return Discretizer(
        target_column=args.target,
        cohen=args.cohen,
        margin=args.margin,
        min_bin_size=args.min_bin_size,
        label_column=args.label_column,
        best_rest=getattr(args, "best_rest", False),
        sort_strategy=args.strategy,
        trace=trace,
    )


def _run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    table = read_table(stdin)
    if args.command == "sort":
        write_table(sort_table(table, -1, args.strategy), stdout)
        return EXIT_OK

    discretizer = _discretizer(args, stderr)
    if args.command == "label":
        result = discretizer.label(table)
    elif args.command == "cuts":
        result = discretizer.annotate_cuts(table, cut_column=args.cut_column)
    else:
        result = discretizer.label_from_cuts(table, cut_column=args.cut_column)

    if args.report is not None:
        _write_report(result, args.report)
    write_table(result.table, stdout)
    return EXIT_OK


def _guarded(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    # 库内错误与报告写入失败统一转为错误日志 + 非零退出码；整表构建完成后才写出
    # BANDLIB_* 环境变量在此加载，命令行参数仍优先于其默认值
    try:
        get_config().load_from_env()
        configure_logging(getattr(args, "log_level", None))
        return _run(args, stdin, stdout, stderr)
    except (TableError, ParamValidationError, DiscretizationError, OSError) as exc:
        logger.error("%s", exc)
        stderr.write(f"error: {exc}\n")
        return EXIT_FAILURE


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Entry point of ``bandlib``; returns the process exit status."""
    args = build_parser().parse_args(argv)
    return _guarded(args, stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr)


def sort_main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Entry point of ``bandsort``; no arguments means merge sort."""
    args = build_sort_parser(prog="bandsort").parse_args(argv)
    args.command = "sort"
    return _guarded(args, stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr)


def _console_main() -> None:
    sys.exit(main())


def _console_sort_main() -> None:
    sys.exit(sort_main())


if __name__ == "__main__":
    _console_main()
