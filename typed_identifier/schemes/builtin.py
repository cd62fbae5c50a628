"""Built-in identifier scheme catalogue.

Order matters: classification walks the registry in this order and takes
the first prefix or pattern hit, so broader patterns (netid, upi) sit last.
"""

from __future__ import annotations

from typed_identifier.schemes.models import (
    GENERIC_SCHEME_ID,
    LabelResolution,
    SchemeDescriptor,
)

BUILTIN_SCHEMES: tuple[SchemeDescriptor, ...] = (
    SchemeDescriptor(
        id="doi",
        label="DOI",
        prefix="https://doi.org/",
        pattern=r"^10\.\d{4,}/[^\s]+$",
        description="Digital Object Identifier",
    ),
    SchemeDescriptor(
        id="orcid",
        label="ORCID",
        prefix="https://orcid.org/",
        pattern=r"^\d{4}-\d{4}-\d{4}-\d{3}[0-9X]$",
        description="Open Researcher and Contributor ID",
    ),
    SchemeDescriptor(
        id="openalex",
        label="OpenAlex ID",
        prefix="https://openalex.org/",
        pattern=r"^[WAICVPFS]\d{2,10}$",
        description="OpenAlex Identifier",
    ),
    SchemeDescriptor(
        id="isbn",
        label="ISBN",
        prefix="https://isbnsearch.org/isbn/",
        pattern=r"^(?:97[89])?\d{9}[\dX]$",
        description="International Standard Book Number",
    ),
    SchemeDescriptor(
        id="issn",
        label="ISSN",
        prefix="https://portal.issn.org/resource/ISSN/",
        pattern=r"^\d{4}-\d{3}[0-9X]$",
        description="International Standard Serial Number",
    ),
    SchemeDescriptor(
        id="pmid",
        label="PubMed ID",
        prefix="https://pubmed.ncbi.nlm.nih.gov/",
        pattern=r"^\d+$",
        description="PubMed Unique Identifier",
    ),
    SchemeDescriptor(
        id="researcherid",
        label="ResearcherID",
        prefix="https://www.webofscience.com/wos/author/record/",
        pattern=r"^[A-Z]-\d{4}-\d{4}$",
        description="Web of Science ResearcherID",
    ),
    SchemeDescriptor(
        id="scopus",
        label="Scopus",
        prefix="https://www.scopus.com/authid/detail.uri?authorId=",
        pattern=r"^\d+$",
        description="Scopus Author Identifier",
    ),
    SchemeDescriptor(
        id="url",
        label="URL",
        pattern=r"^https?://[^\s]*$",
        description="Full web URL (http or https only)",
    ),
    SchemeDescriptor(
        id="urn",
        label="URN",
        pattern=r"^[a-z0-9][a-z0-9-]{0,31}:[a-z0-9()+,\-.:=@;$_!*'%/?#]+$",
        description="Uniform Resource Name (NID:NSS after the urn: token)",
    ),
    SchemeDescriptor(
        id="netid",
        label="NetID",
        pattern=r"^[a-zA-Z0-9_]*$",
        description="NetID",
    ),
    SchemeDescriptor(
        id="upi",
        label="UPI",
        pattern=r"^\d+$",
        description="UPI Number",
    ),
    SchemeDescriptor(
        id=GENERIC_SCHEME_ID,
        label="Custom",
        description="Custom identifier type with configurable labels",
        label_resolution=LabelResolution.catalog,
    ),
)
