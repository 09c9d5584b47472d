"""Command-line interface for continuous shape measures."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.domain.exceptions import InvalidInputError, ShapeMeasureError
from ...core.domain.models.search_parameters import SearchMode
from ...core.services.ranking_service import GeometryRankingService, write_csv
from ...core.services.shape_measure_service import ShapeMeasureService
from ...data.reference_geometries import geometries_for

logger = logging.getLogger("qshape")


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Compute continuous shape measures of coordination geometries"
    )
    parser.add_argument("request", help="JSON request file")
    parser.add_argument(
        "-o", "--output", help="Response JSON file (default: standard output)"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SearchMode],
        help="Search mode (overrides the request)",
    )
    parser.add_argument("--seed", type=int, help="Random seed (overrides the request)")
    parser.add_argument(
        "--geometry", help="Reference geometry code from the table, e.g. OC-6"
    )
    parser.add_argument(
        "--rank",
        action="store_true",
        help="Rank every table geometry with a matching coordination number",
    )
    parser.add_argument("--csv", help="Write the ranking to this CSV file")
    parser.add_argument(
        "--workers", type=int, default=None, help="Worker processes for --rank"
    )
    parser.add_argument(
        "--optimal-scaling",
        action="store_true",
        help="Rescale the reference per candidate (SHAPE convention)",
    )
    parser.add_argument(
        "--flexible",
        action="store_true",
        help="Also report the measure with anisotropic scaling of the reference",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def _setup_logging(verbose: bool, log_file: Optional[str] = None) -> None:
    """Attach console and file handlers to the package logger."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(logging.INFO if verbose else logging.ERROR)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.setLevel(logging.INFO if verbose or log_file else logging.ERROR)


def _load_request(path: str) -> Dict[str, Any]:
    with open(path) as f:
        request = json.load(f)
    if not isinstance(request, dict):
        raise InvalidInputError("Request must be a JSON object")
    return request


def _rank(request: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    actual = request.get("actualCoordinates")
    if not actual:
        raise InvalidInputError("Request requires actualCoordinates")
    coordination_number = len(actual) - (1 if request.get("includesCenter") else 0)
    if request.get("includesCenter"):
        actual = actual[:-1]

    geometries = geometries_for(coordination_number)
    if not geometries:
        raise InvalidInputError(
            f"No reference geometries for coordination number {coordination_number}"
        )

    service = GeometryRankingService(max_workers=args.workers)
    rankings = service.rank(
        actual,
        geometries,
        mode=request.get("mode", SearchMode.DEFAULT),
        seed=request.get("seed"),
        show_progress=args.verbose,
    )
    if args.csv:
        write_csv(rankings, args.csv)

    return {
        "rankings": [
            dict(r.to_dict(), **r.result.to_dict()) if r.result else r.to_dict()
            for r in rankings
        ]
    }


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Build the response dictionary for parsed command-line arguments."""
    try:
        request = _load_request(args.request)
    except (OSError, json.JSONDecodeError) as e:
        return InvalidInputError(f"Cannot read request: {e}").to_dict()
    except ShapeMeasureError as e:
        return e.to_dict()

    if args.mode:
        request["mode"] = args.mode
    if args.seed is not None:
        request["seed"] = args.seed

    if args.rank:
        try:
            return _rank(request, args)
        except ShapeMeasureError as e:
            logger.error("Ranking failed: %s", e.message)
            return e.to_dict()
        except ValueError as e:
            return InvalidInputError(str(e)).to_dict()

    if args.geometry:
        request["referenceGeometry"] = args.geometry
    if args.flexible:
        request["flexible"] = True

    service = ShapeMeasureService()
    return service.compute_response(
        request, optimal_scaling=True if args.optimal_scaling else None
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the shape measure CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, args.log_file)

    response = run(args)
    text = json.dumps(response, indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n")
        logger.info("Response written to %s", args.output)
    else:
        print(text)

    if "errorKind" in response:
        logger.error("%s: %s", response["errorKind"], response["message"])
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
