"""Specialty document detection from upstream response headers."""

from typing import Any, Mapping

from .errors import AddFeatureError

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


def _content_type(headers: Mapping[str, Any] | None) -> str | None:
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() == "content-type" and value:
            return str(value).split(";", 1)[0].strip().lower()
    return None


def specialty_scrape_check(logger: Any, headers: Mapping[str, Any] | None) -> None:
    """Abort the scrape when the document needs a specialty handler.

    Args:
        logger: Scoped logger
        headers: Upstream response headers echoed by the engine

    Raises:
        AddFeatureError: If the document is a PDF or DOCX file
    """
    content_type = _content_type(headers)

    if content_type == PDF_CONTENT_TYPE:
        logger.bind(content_type=content_type).debug("Document is a PDF, switching handler")
        raise AddFeatureError(["pdf"])

    if content_type == DOCX_CONTENT_TYPE:
        logger.bind(content_type=content_type).debug("Document is a DOCX, switching handler")
        raise AddFeatureError(["docx"])
