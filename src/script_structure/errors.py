class InputError(ValueError):
    """The document has no pages, or no extractable text on any page."""

    def __init__(self, message: str, *, page_count: int = 0):
        super().__init__(message)
        self.page_count = page_count
