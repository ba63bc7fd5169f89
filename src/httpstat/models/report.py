"""Report rendering options."""

from pydantic import BaseModel, Field


class ReportOptions(BaseModel):
    """Switches controlling optional report sections."""

    show_remote_address: bool = Field(
        default=True, description="Print the 'Connected to' line before the status line"
    )
    show_body: bool = Field(default=False, description="Persist the body after the table")
