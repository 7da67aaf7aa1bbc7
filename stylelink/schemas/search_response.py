"""Decoding of search-provider payloads.

The provider is not consistent about its response shape: it may answer with
``{"results": [...]}``, ``{"items": [...]}``, or a single bare result object.
Each shape gets a named variant here and ``to_candidates`` is the only place
that turns one into ``Candidate`` objects.
"""
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import ValidationError

from stylelink.schemas.product_link import Candidate


@dataclass(frozen=True)
class ResultsResponse:
    entries: list[Any] = field(default_factory=list)
    kind: Literal["results"] = "results"


@dataclass(frozen=True)
class ItemsResponse:
    entries: list[Any] = field(default_factory=list)
    kind: Literal["items"] = "items"


@dataclass(frozen=True)
class SingleResultResponse:
    entry: dict[str, Any] = field(default_factory=dict)
    kind: Literal["single"] = "single"


@dataclass(frozen=True)
class UnrecognizedResponse:
    payload: Any = None
    kind: Literal["unrecognized"] = "unrecognized"


RawSearchResponse = ResultsResponse | ItemsResponse | SingleResultResponse | UnrecognizedResponse


def decode_search_response(payload: Any) -> RawSearchResponse:
    """Classify a decoded JSON payload into one of the known response shapes."""
    if not isinstance(payload, dict):
        return UnrecognizedResponse(payload)
    if isinstance(payload.get("results"), list):
        return ResultsResponse(payload["results"])
    if isinstance(payload.get("items"), list):
        return ItemsResponse(payload["items"])
    if isinstance(payload.get("url"), str):
        return SingleResultResponse(payload)
    return UnrecognizedResponse(payload)


def to_candidates(raw: RawSearchResponse) -> list[Candidate]:
    match raw:
        case ResultsResponse(entries=entries) | ItemsResponse(entries=entries):
            pass
        case SingleResultResponse(entry=entry):
            entries = [entry]
        case _:
            return []

    candidates = []
    for entry in entries:
        candidate = _candidate_from_entry(entry)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def _candidate_from_entry(entry: Any) -> Candidate | None:
    if not isinstance(entry, dict):
        return None
    url = entry.get("url")
    if not isinstance(url, str) or not url.strip():
        return None

    # workers disagree on "imageUrl" vs "image"
    image_url = entry.get("imageUrl") or entry.get("image")
    try:
        return Candidate(
            url=url.strip(),
            title=_as_text(entry.get("title")),
            price=_as_text(entry.get("price")),
            brand=_as_text(entry.get("brand")),
            image_url=_as_text(image_url),
        )
    except ValidationError:
        return None


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None
