"""Command-line interface: convert Pitaval plain text files into TEI P5 XML.

Usage:
    pitaval-convert --indir=DIR --outdir=DIR [--template=FILE] [-v]
    python -m pitaval --config=run.yaml

Options:
    --indir=DIR        Plain text files source directory (``*.txt``).
    --outdir=DIR       TEI P5 XML files target directory, created if absent.
                       Target file names are normalized: characters other
                       than ASCII letters, digits, ``-`` and ``_`` become
                       ``_`` and names are cut to 100 characters plus the
                       ``.xml`` extension.
    --template=FILE    TEI template to populate (defaults to the template
                       shipped with the package).
    --config=FILE      YAML file with any of: indir, outdir, template,
                       formatter, verbose. Command-line flags win.
    --formatter=NAME   ``lxml`` (default) or ``xmllint``.
    -v                 Verbose output to stderr.
    --man              Print this help text and exit.

Exit codes: 0 success, 2 configuration error, 3 filesystem error,
1 any other conversion error.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pitaval.config import resolve_run_config
from pitaval.errors import ConfigurationError, FilesystemError, PitavalError
from pitaval.logging_setup import setup_logging
from pitaval.pipeline import ConvertPipeline
from pitaval.tei.assembler import TeiAssembler
from pitaval.tei.formatter import FORMATTERS, get_formatter

logger = logging.getLogger(__name__)

__all__ = ["main", "build_parser"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pitaval-convert",
        description="Convert Pitaval plain text files into TEI P5 XML.",
    )
    parser.add_argument("--indir", help="Plain text files source directory")
    parser.add_argument("--outdir", help="TEI P5 XML files target directory")
    parser.add_argument("--template", help="TEI template file")
    parser.add_argument("--config", help="YAML run configuration")
    parser.add_argument("--formatter", choices=sorted(FORMATTERS), help="XML pretty printer")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Verbose output to stderr")
    parser.add_argument("--man", action="store_true", help="Print the full manual and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter CLI.

    Args:
        argv: Optional list of command-line arguments. When ``None``,
            arguments are read from ``sys.argv``.

    Returns:
        Process exit code: ``0`` on success, non-zero on error.
    """
    args = build_parser().parse_args(argv)
    if args.man:
        print(__doc__)
        return 0

    try:
        cfg = resolve_run_config(
            args.config,
            indir=args.indir,
            outdir=args.outdir,
            template=args.template,
            formatter=args.formatter,
            verbose=args.verbose,
        )
    except ConfigurationError as exc:
        setup_logging(force=True)
        logger.error("%s", exc)
        return 2

    setup_logging(verbose=cfg.verbose, force=True)

    try:
        pipeline = ConvertPipeline(TeiAssembler(cfg.template), get_formatter(cfg.formatter))
        pipeline.run(cfg.indir, cfg.outdir)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2
    except FilesystemError as exc:
        logger.error("%s", exc)
        return 3
    except PitavalError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
