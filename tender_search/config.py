"""
Tender Search — Configuration: feed location, timings, field contract.
"""
import os

# ---------------------------------------------------------------------------
# Feed — override with TENDER_FEED_URL env var (e.g. a local mirror)
# ---------------------------------------------------------------------------
FEED_URL = os.environ.get(
    "TENDER_FEED_URL",
    "https://canadabuys.canada.ca/opendata/pub/openTenderNotice-ouvertAvisAppelOffres.csv",
)
FETCH_TIMEOUT = float(os.environ.get("TENDER_FETCH_TIMEOUT", "60"))

# ---------------------------------------------------------------------------
# Timings (seconds)
# ---------------------------------------------------------------------------
SEARCH_DEBOUNCE_SECONDS = 0.3
REFRESH_DEBOUNCE_SECONDS = float(os.environ.get("TENDER_REFRESH_DEBOUNCE", "0.3"))

# ---------------------------------------------------------------------------
# Logical fields, in canonical display/export order
# ---------------------------------------------------------------------------
FIELD_NAMES = [
    "title",
    "attachment",
    "contractingEntityName",
    "publicationDate",
    "tenderClosingDate",
    "expectedContractStartDate",
    "contactInfoName",
    "contactInfoEmail",
    "contactInfoPhone",
    "referenceNumber",
    "solicitationNumber",
    "unspsc",
    "unspscDescription",
]

FIELD_LABELS = {
    "title": "Title",
    "attachment": "Attachments",
    "contractingEntityName": "Contracting Entity",
    "publicationDate": "Published Date",
    "tenderClosingDate": "Closing Date",
    "expectedContractStartDate": "Start Date",
    "contactInfoName": "Contact Name",
    "contactInfoEmail": "Email",
    "contactInfoPhone": "Phone",
    "referenceNumber": "Reference #",
    "solicitationNumber": "Solicitation #",
    "unspsc": "UNSPSC",
    "unspscDescription": "UNSPSC Description",
}

SORTABLE_FIELDS = {"title", "contractingEntityName", "publicationDate"}

# ---------------------------------------------------------------------------
# Header normalisation — a raw header is cut at the first of these, in order
# ---------------------------------------------------------------------------
HEADER_SUFFIX_DELIMITERS = ["-", "."]

# ---------------------------------------------------------------------------
# Export defaults
# ---------------------------------------------------------------------------
EXPORT_CSV_FILENAME = "filtered_results.csv"
EXPORT_XLSX_FILENAME = "filtered_results.xlsx"
ATTACHMENT_URL_PREFIX = "http"
