"""Test helpers for payloads and store failure injection."""

from pymongo.errors import PyMongoError

OWNER_EMAIL = "owner@example.com"
OWNER_PASSWORD = "owner-password"


def project_payload(**overrides) -> dict:
    payload = {
        "project_name": "Portfolio",
        "small_description": "Personal site",
        "description": "A personal portfolio website",
        "skills": ["python", "fastapi"],
        "project_repository": "https://github.com/example/portfolio",
        "project_live_link": "https://example.com",
        "project_video": "",
    }
    payload.update(overrides)
    return payload


class FailingCollection:
    """Wraps a collection and makes one method raise after ``fail_after`` successful calls.

    Every other attribute is delegated untouched to the wrapped collection.
    """

    def __init__(self, collection, method: str, fail_after: int = 0):
        self._collection = collection
        self._method = method
        self._fail_after = fail_after
        self.calls = 0

    def __getattr__(self, name):
        attr = getattr(self._collection, name)
        if name != self._method:
            return attr

        async def _maybe_fail(*args, **kwargs):
            if self.calls >= self._fail_after:
                raise PyMongoError(f"simulated {name} failure")
            self.calls += 1
            return await attr(*args, **kwargs)

        return _maybe_fail
