"""Resolved endpoint model."""

from urllib.parse import quote

from pydantic import BaseModel, Field


class Endpoint(BaseModel):
    """
    A resolved service endpoint.

    Path segments are accumulated in the order they are added; ``url``
    joins them onto the base URL.
    """

    base_url: str = Field(
        ...,
        description="Scheme, host and optional base path (e.g. https://databrew.us-east-1.amazonaws.com)"
    )
    signing_region: str = Field(
        ...,
        description="Region used for SigV4 signing"
    )
    signing_name: str = Field(
        ...,
        description="Service name used for SigV4 signing"
    )
    path_segments: list[str] = Field(
        default_factory=list,
        description="Percent-encoded path segments appended to the base URL"
    )
    query_string: str = Field(
        default="",
        description="Query string without the leading '?'"
    )

    def add_path_segments(self, path: str) -> "Endpoint":
        """
        Append a literal path, one segment per non-empty '/' separated piece.

        Args:
            path: Literal path such as "/recipes/" or "/jobRun/"

        Returns:
            This endpoint, for chaining
        """
        for piece in path.split("/"):
            if piece:
                self.path_segments.append(quote(piece, safe=""))
        return self

    def add_path_segment(self, value: object) -> "Endpoint":
        """
        Append a single segment, percent-encoding any '/' in the value.

        Args:
            value: Segment value (converted with str())

        Returns:
            This endpoint, for chaining
        """
        self.path_segments.append(quote(str(value), safe=""))
        return self

    def set_query_string(self, query_string: str) -> "Endpoint":
        self.query_string = query_string.lstrip("?")
        return self

    @property
    def path(self) -> str:
        base_path = self.base_url.split("://", 1)[-1]
        base_path = base_path[len(base_path.split("/", 1)[0]):].rstrip("/")
        return base_path + "/" + "/".join(self.path_segments)

    @property
    def url(self) -> str:
        root = self.base_url.rstrip("/")
        url = root + "/" + "/".join(self.path_segments)
        if self.query_string:
            url = f"{url}?{self.query_string}"
        return url
