"""Request DTOs for API endpoints."""

from pydantic import AliasChoices, BaseModel, Field


class SearchRequest(BaseModel):
    """Request DTO for running a search.

    The handler treats it as a confirmed query (Enter): it is searched
    immediately, without the debounce.
    """

    query: str = Field(..., description="The text typed in the search box", max_length=200)


class CatalogItem(BaseModel):
    """A product in a catalog replacement request."""

    id: str | int = Field(
        ...,
        description='Product identifier, sent as "id" or "$id"',
        validation_alias=AliasChoices("id", "$id"),
    )
    name: str | None = Field(None, description="Product name (items without one never match)")
    price: float = Field(0, description="Product price", ge=0)
    stock: int | None = Field(None, description="Remaining stock, null when unlimited", ge=0)


class ReplaceCatalogRequest(BaseModel):
    """Request DTO for replacing the catalog snapshot."""

    items: list[CatalogItem] = Field(
        default_factory=list,
        description="The complete new catalog, in display order",
    )
