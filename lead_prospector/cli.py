"""Command line interface for running a prospecting search."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from .collaborators.base import SearchCollaborator
from .collaborators.sample import CannedResponseSearch
from .config import ConfigurationError, ProspectorSettings, load_configuration
from .exporters import default_export_filename
from .factory import build_collaborator
from .models import MAX_LIMIT, MIN_LIMIT, NormalizedLead, SearchRequest
from .orchestrator import ProspectingOrchestrator, SearchFailed, SearchSession


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Find local businesses without a website and generate outreach messages",
    )
    parser.add_argument("query", nargs="?", default=None, help="Type of business to search for (e.g. cafeterías)")
    parser.add_argument("--city", default=None, help="City to search in (e.g. Málaga)")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help=f"Maximum number of businesses to return ({MIN_LIMIT}-{MAX_LIMIT})",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Where to write the leads (.csv or .xlsx). Defaults to prospectos_<query>_<city>.csv",
    )
    parser.add_argument("--config", default=None, help="Path to a configuration file (YAML or JSON)")
    parser.add_argument(
        "--response-file",
        default=None,
        help="Replay a saved model response instead of calling the search service",
    )
    parser.add_argument("--no-maps", action="store_true", help="Disable Google Maps grounding")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _build_collaborator(args: argparse.Namespace, settings: ProspectorSettings) -> SearchCollaborator:
    if args.response_file:
        return CannedResponseSearch(path=args.response_file)
    return build_collaborator(settings)


def _print_summary(leads: Iterable[NormalizedLead]) -> None:
    for lead in leads:
        print(f"{lead.star_rating()}  {lead.name}  |  {lead.phone or '-'}  |  {lead.email}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = load_configuration(args.config) if args.config else {}
        settings = ProspectorSettings.from_mapping(config)
        collaborator = _build_collaborator(args, settings)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return 2

    request = SearchRequest(
        query=args.query or settings.defaults.query,
        city=args.city or settings.defaults.city,
        limit=args.limit if args.limit is not None else settings.defaults.limit,
    )
    orchestrator = ProspectingOrchestrator(
        collaborator,
        use_maps=settings.use_maps and not args.no_maps,
        site_base_url=settings.site_base_url,
    )

    with SearchSession(orchestrator) as session:
        try:
            leads = session.search(request)
        except SearchFailed as exc:
            print(exc.user_message, file=sys.stderr)
            return 1

        _print_summary(leads)
        output = args.output or default_export_filename(request.query, request.city)
        written = session.export(output)

    if written is None:
        logging.warning("No leads were found - nothing to export")
        return 0

    logging.info("Found %s leads for '%s' in %s", len(leads), request.query, request.city)
    logging.info("Leads written to %s", Path(written).resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
