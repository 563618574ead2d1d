"""Shared pytest fixtures: a small feed with versioned headers and its Table."""

import pandas as pd
import pytest

from tender_search.data.loader import load_table
from tender_search.data.normalize import empty_table
from tender_search.data.schemas import LOGICAL_FIELDS

# Header names follow the live feed: "<field>-<french name>-<lang>" plus a
# duplicate French title column that must be ignored.
FEED_HEADER = (
    "title-titre-eng,title-titre-fra,referenceNumber-numeroReference,"
    "solicitationNumber-numeroSollicitation,publicationDate-datePublication,"
    "tenderClosingDate-appelOffresDateCloture,"
    "contractingEntityName-nomEntitContractante-eng,"
    "contactInfoName-informationsContactNom,contactInfoEmail-informationsContactCourriel,"
    "attachment-piecesJointes-eng,unspsc,unspscDescription-eng"
)

FEED_ROWS = [
    '"Snow Removal","Déneigement",REF-1,SOL-1,2024-01-03,2024-02-01,'
    '"Public Works, Ottawa",Ann Lee,ann@example.gc.ca,'
    '"https://a.example/1.pdf, notes.txt",72102900,Snow removal services',
    '"Bridge Inspection","Inspection de pont",REF-2,SOL-2,2024-01-01,2024-03-01,'
    'Transport Canada,Bo Chen,,,,',
    '"Accounting Software","Logiciel comptable",REF-3,SOL-3,2024-01-02,2024-01-20,'
    '"Public Works, Ottawa",,,"https://a.example/3.pdf,https://a.example/3b.pdf",43231500,'
    '"Software, ""accounting"""',
]


@pytest.fixture
def feed_text():
    """Raw CSV text shaped like the open tender feed (BOM included)."""
    return "\ufeff" + FEED_HEADER + "\n" + "\n".join(FEED_ROWS) + "\n"


@pytest.fixture
def feed_table(feed_text):
    """The three-row Table projected from feed_text."""
    return load_table(feed_text)


def make_table(rows):
    """Build a Table from partial records; unspecified fields are ``""``."""
    if not rows:
        return empty_table()
    data = {f.value: [str(r.get(f.value, "")) for r in rows] for f in LOGICAL_FIELDS}
    return pd.DataFrame(data, dtype=object)


@pytest.fixture
def table_factory():
    return make_table
