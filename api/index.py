from functools import lru_cache
import logging
import math
import os
from pathlib import Path
import sys
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from menu_match import __version__  # noqa: E402
from menu_match.catalog import Catalog  # noqa: E402
from menu_match.config import MenuMatchConfig  # noqa: E402
from menu_match.exceptions import MenuMatchError, UnknownItemError  # noqa: E402
from menu_match.parser import load_catalog_file  # noqa: E402
from menu_match.schema import CatalogEntry, ConstraintSpec  # noqa: E402
from menu_match.taxonomy import AttributeKey, AttributeValue, Vocabulary  # noqa: E402

app = FastAPI(title="menu-match API", version=__version__)
logger = logging.getLogger(__name__)

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ItemResponse(BaseModel):
    identifier: int
    name: str
    price: float
    description: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class ItemListResponse(BaseModel):
    total: int
    items: list[ItemResponse]


class OptionsResponse(BaseModel):
    key: str
    total: int
    values: list[Any]


class SearchRequest(BaseModel):
    constraints: dict[str, Any] = Field(default_factory=dict)
    minPrice: float = Field(default=0.0, ge=0)
    maxPrice: float | None = Field(default=None, ge=0)


@lru_cache(maxsize=4)
def _load_catalog(path: str, encoding: str) -> Catalog:
    return load_catalog_file(path, encoding=encoding)


def get_catalog() -> Catalog:
    config = MenuMatchConfig.from_env()
    try:
        return _load_catalog(config.catalog_path, config.catalog_encoding)
    except MenuMatchError as exc:
        logger.exception("catalog load failed")
        raise HTTPException(status_code=503, detail=f"catalog unavailable: {exc}") from exc


def _json_value(value: AttributeValue) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, Vocabulary):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(_json_value(item) for item in value)
    return value


def _item_response(entry: CatalogEntry) -> ItemResponse:
    return ItemResponse(
        identifier=entry.identifier,
        name=entry.name,
        price=entry.price,
        description=entry.description,
        attributes={key.value: _json_value(value) for key, value in entry.attributes.items()},
    )


def _item_list(entries: list[CatalogEntry]) -> ItemListResponse:
    return ItemListResponse(total=len(entries), items=[_item_response(entry) for entry in entries])


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/options/{key}", response_model=OptionsResponse)
def options(key: str, response: Response, catalog: Catalog = Depends(get_catalog)) -> OptionsResponse:
    try:
        attribute = AttributeKey.parse(key)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid attribute: {key}") from exc

    values = sorted(_json_value(value) for value in catalog.distinct_values(attribute))
    response.headers["Cache-Control"] = "public, max-age=60"
    return OptionsResponse(key=attribute.value, total=len(values), values=values)


@app.get("/items", response_model=ItemListResponse)
def list_items(catalog: Catalog = Depends(get_catalog)) -> ItemListResponse:
    return _item_list(list(catalog))


@app.get("/items/{identifier}", response_model=ItemResponse)
def get_item(identifier: int, catalog: Catalog = Depends(get_catalog)) -> ItemResponse:
    try:
        return _item_response(catalog.get(identifier))
    except UnknownItemError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/search", response_model=ItemListResponse)
def search(body: SearchRequest, catalog: Catalog = Depends(get_catalog)) -> ItemListResponse:
    try:
        spec = ConstraintSpec(
            constraints=body.constraints,
            min_price=body.minPrice,
            max_price=math.inf if body.maxPrice is None else body.maxPrice,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=[error["msg"] for error in exc.errors()],
        ) from exc

    return _item_list(catalog.find_matches(spec))
