class CmsError(Exception):
    """Base exception for all CMS access errors."""
    def __init__(self, message: str):
        super().__init__(message)


class CmsRequestError(CmsError):
    """Raised when the CMS cannot be reached or answers with an error status."""
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class CmsResponseError(CmsError):
    """Raised when the CMS answers with a body that is not a query result."""
    def __init__(self, detail: str):
        super().__init__(f"Malformed CMS response: {detail}")


class DocumentNotFoundError(CmsError):
    """Raised when a lookup by slug matches no document."""
    def __init__(self, document_type: str, slug: str):
        self.document_type = document_type
        self.slug = slug
        super().__init__(f"No {document_type} with slug: {slug}")
