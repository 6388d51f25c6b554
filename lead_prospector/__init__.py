"""Turn a local business search into enriched, exportable sales leads."""

from . import models  # noqa: F401
from .exporters import export_leads, leads_to_csv, leads_to_dataframe
from .extraction import MalformedResponse, extract_json_array
from .models import LeadCollection, NormalizedLead, RawLeadCandidate, SearchRequest
from .normalize import normalize_candidate
from .orchestrator import ProspectingOrchestrator, SearchFailed, SearchInProgress, SearchSession
from .slug import slugify
from .sorting import sort_leads
from .templates import OutreachTemplates, build_outreach

__all__ = [
    "LeadCollection",
    "MalformedResponse",
    "NormalizedLead",
    "OutreachTemplates",
    "ProspectingOrchestrator",
    "RawLeadCandidate",
    "SearchFailed",
    "SearchInProgress",
    "SearchRequest",
    "SearchSession",
    "build_outreach",
    "export_leads",
    "extract_json_array",
    "leads_to_csv",
    "leads_to_dataframe",
    "normalize_candidate",
    "slugify",
    "sort_leads",
    "collaborators",
    "orchestrator",
]
