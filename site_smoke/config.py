"""Configuration for a smoke test run."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_API_BASE_URL = "https://func-britedge-assignment.azurewebsites.net/api"
DEFAULT_WEBSITE_URL = "https://thankful-sand-085c06103.2.azurestaticapps.net"


class HeaderExpectation(BaseModel):
    """Expected value of a response header.

    Exactly one of ``equals`` (exact match) or ``contains`` (substring match)
    must be set.
    """

    name: str
    equals: str | None = None
    contains: str | None = None

    @model_validator(mode="after")
    def validate_match_mode(self) -> "HeaderExpectation":
        if (self.equals is None) == (self.contains is None):
            raise ValueError(
                f"Header '{self.name}' needs exactly one of 'equals' or 'contains'"
            )
        return self

    def matches(self, value: str | None) -> bool:
        """Check a header value, a missing header never matches."""
        if value is None:
            return False
        if self.equals is not None:
            return value == self.equals
        return self.contains is not None and self.contains in value


class ContentMarker(BaseModel):
    """Substrings that must be present in the website HTML.

    The marker is found when any string of ``any_of`` occurs and all strings
    of ``all_of`` occur. Empty lists are ignored.
    """

    name: str
    any_of: Sequence[str] = ()
    all_of: Sequence[str] = ()

    @model_validator(mode="after")
    def validate_not_empty(self) -> "ContentMarker":
        if not self.any_of and not self.all_of:
            raise ValueError(f"Content marker '{self.name}' has nothing to look for")
        return self

    def found_in(self, html: str) -> bool:
        if self.any_of and not any(text in html for text in self.any_of):
            return False
        return all(text in html for text in self.all_of)


DEFAULT_SECURITY_HEADERS = (
    HeaderExpectation(name="X-Frame-Options", equals="DENY"),
    HeaderExpectation(name="X-Content-Type-Options", equals="nosniff"),
    HeaderExpectation(name="X-XSS-Protection", equals="1; mode=block"),
    HeaderExpectation(name="Strict-Transport-Security", contains="max-age="),
)

DEFAULT_CONTENT_MARKERS = (
    ContentMarker(name="navigation", any_of=("nav-link", "navigation")),
    ContentMarker(name="content", all_of=("BritEdge", "Manufacturing")),
    ContentMarker(name="styling", all_of=("tailwindcss",)),
)


class SuiteConfig(BaseModel):
    """Configuration for a smoke test run."""

    api_base_url: str = DEFAULT_API_BASE_URL
    website_url: str = DEFAULT_WEBSITE_URL
    api_endpoints: Sequence[str] = (
        "GetBritEdgeInfo",
        "GetTestimonials",
        "GetCustomers",
    )
    cors_endpoint: str = "GetBritEdgeInfo"
    latency_threshold_ms: int = Field(default=2000, gt=0)
    security_headers: Sequence[HeaderExpectation] = DEFAULT_SECURITY_HEADERS
    content_markers: Sequence[ContentMarker] = DEFAULT_CONTENT_MARKERS
    # None keeps the HTTP client's own default timeout
    timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def api_url(self, endpoint: str) -> str:
        """Absolute URL of an API resource."""
        return f"{self.api_base_url}/{endpoint}"
