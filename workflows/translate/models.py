"""Report types for the translate workflow."""

from pydantic import BaseModel

NOT_FOUND_LABEL = "???"


class ReportRow(BaseModel):
    """One line of the translation report."""

    lang: str
    label: str
    url: str = ""
    found: bool = True
