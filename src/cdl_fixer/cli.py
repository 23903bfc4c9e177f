from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import FixerConfig
from .contracts.errors import CdlFixerError
from .io import read_netlist, write_netlist
from .logging_utils import get_logger
from .operators.netlist import CdlFixOperator

USAGE_EXAMPLES = """examples:
  cdl-fixer < input.cdl > output.cdl
  cdl-fixer --input input.cdl --output output.cdl
  cdl-fixer --input input.cdl --output output.cdl --soc-module example.soc_mod
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdl-fixer",
        description="Fix a CDL netlist for layout-tool import.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    basic = parser.add_argument_group("Basic options")
    basic.add_argument("-i", "--input", type=Path, help="Input netlist (default: stdin).")
    basic.add_argument("-o", "--output", type=Path, help="Output netlist (default: stdout).")

    extra = parser.add_argument_group("Additional options")
    extra.add_argument("--no-param", action="store_true", help="Do not insert missing section declarations.")
    extra.add_argument("--no-case-conversion", action="store_true", help="Disable attribute key case conversion.")
    extra.add_argument("--no-calc-data", action="store_true", help="Disable fw/w/l calculation.")
    extra.add_argument("--no-header", action="store_true", help="Do not add the comment banners.")
    extra.add_argument("-m", "--soc-module", type=Path, help="Module/port description for *.PININFO lines.")
    extra.add_argument("-v", "--verbose", action="store_true", help="Log pass details to stderr.")
    return parser


def config_from_args(args: argparse.Namespace) -> FixerConfig:
    return FixerConfig(
        case_conversion=not args.no_case_conversion,
        section_defaults=not args.no_param,
        header=not args.no_header,
        calc_geometry=not args.no_calc_data,
        module_descriptor=args.soc_module,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger("cdl_fixer", "DEBUG" if args.verbose else None)

    try:
        config = config_from_args(args)
        netlist_text = read_netlist(args.input)
        result = CdlFixOperator(config).run({"netlist_text": netlist_text}, ctx=None)
        for warning in result.warnings:
            logger.info(warning)
        write_netlist(result.outputs["fixed_text"], args.output)
    except CdlFixerError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
