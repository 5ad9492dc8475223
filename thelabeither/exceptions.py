class MissingBranchError(TypeError):
    """
    Raised when ``fold`` is given a branch handler that can't be called.

    Folding an ``Either`` must handle both cases, so a missing handler is
    rejected up front instead of silently returning ``None`` later.
    """

    def __init__(self, branch: str, handler: object) -> None:
        self.branch = branch
        self.handler = handler
        super().__init__(
            f"fold() requires a callable {branch} handler, got {handler!r}"
        )
