from wikisummary.schemas.schemas import (
    SummaryRenderRequest, SummaryRenderResponse,
    PreviewResponse,
    MAX_TEXT_LENGTH,
)

__all__ = [
    "SummaryRenderRequest", "SummaryRenderResponse",
    "PreviewResponse",
    "MAX_TEXT_LENGTH",
]
