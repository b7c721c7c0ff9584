"""
Navigation Exceptions
"""


class InvalidSelection(Exception):
    """
    Raised when a selection references a topic or sub-topic that is not in
    the currently loaded FAQContent (e.g. a stale button after a reload).
    """

    def __init__(self, key: str, sub: str | None = None):
        self.key = key
        self.sub = sub
        target = f"'{key}' / '{sub}'" if sub is not None else f"'{key}'"
        super().__init__(f"Selection {target} is not in the loaded content.")
