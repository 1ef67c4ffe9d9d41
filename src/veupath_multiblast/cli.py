"""Console entrypoint: print the multi-blast job body for a set of WDK params."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from veupath_multiblast.domain.blast.job_body import build_blast_create_job_body
from veupath_multiblast.domain.blast.params import (
    BlastParam,
    get_normalized_value,
    is_blast_param,
)
from veupath_multiblast.domain.blast.tools import missing_params, parse_blast_tool
from veupath_multiblast.platform.config import get_settings
from veupath_multiblast.platform.errors import AppError, ValidationError, problem_detail
from veupath_multiblast.platform.logging import get_logger, setup_logging
from veupath_multiblast.platform.types import as_param_values

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="veupath-multiblast-body",
        description="Convert WDK BLAST param values into a multi-blast job body.",
    )
    parser.add_argument(
        "params_file",
        help="JSON object of WDK param values, or '-' to read stdin.",
    )
    parser.add_argument(
        "--site",
        default=None,
        help="Submitting project ID (default: VEUPATHDB_DEFAULT_SITE setting).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent of the printed body (default: 2).",
    )
    return parser


def _read_params(path: str) -> dict[str, str]:
    if path == "-":
        raw = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as handle:
            raw = json.load(handle)
    return as_param_values(raw)


def _check_complete(params: dict[str, str]) -> None:
    if BlastParam.ALGORITHM not in params:
        raise ValidationError(
            title="Missing parameters",
            detail=f"Missing required parameter: {BlastParam.ALGORITHM}",
            errors=[{"param": BlastParam.ALGORITHM.value}],
        )
    tool = parse_blast_tool(get_normalized_value(params, BlastParam.ALGORITHM))
    missing = missing_params(params, tool)
    if missing:
        raise ValidationError(
            title="Missing parameters",
            detail=f"Tool '{tool}' requires: {', '.join(missing)}",
            errors=[{"param": name} for name in missing],
        )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()
    site = args.site or get_settings().veupathdb_default_site

    try:
        params = _read_params(args.params_file)
    except (OSError, ValueError, TypeError) as exc:
        print(f"[ERROR] could not read params: {exc}", file=sys.stderr)
        return 1

    unknown = sorted(name for name in params if not is_blast_param(name))
    if unknown:
        logger.info("Ignoring non-blast params", params=unknown)

    try:
        _check_complete(params)
        body = build_blast_create_job_body(site, params)
    except AppError as exc:
        print(
            json.dumps(problem_detail(exc, instance=args.params_file)),
            file=sys.stderr,
        )
        return 2
    except ValueError as exc:
        # malformed numeric value that made it past the form
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    print(json.dumps(body.to_json(), indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
