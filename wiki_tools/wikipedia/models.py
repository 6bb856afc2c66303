"""Pydantic data models for Wikipedia lookups."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ResolvedArticle(BaseModel):
    """Source-language article chosen by the search step."""

    title: str
    url: str


class LangLink(BaseModel):
    """Equivalent article in another language edition."""

    model_config = ConfigDict(populate_by_name=True)

    lang: str
    # "*" in the default response format, "title" with formatversion=2
    display_title: str = Field(validation_alias=AliasChoices("display_title", "*", "title"))
    url: str = ""  # needs llprop=url
