"""Business logic services for the pipeline."""

from tzpatch.domain.models import PatchRequest


class ResourceLocator:
    """Service for building resource download URLs."""

    @staticmethod
    def base_url(root_url: str, request: PatchRequest) -> str:
        """Return the directory URL holding the resources for a request.

        Args:
            root_url: Root of the tzdata tree, e.g. ``https://host/tzdata/icunew``
            request: Patch request supplying the version tags

        Returns:
            URL ending with ``/`` that resource names are appended to
        """
        return (
            f"{root_url.rstrip('/')}/"
            f"{request.timezone_version}/{request.icu_version}/{request.endianness.value}/"
        )

    @classmethod
    def resource_url(cls, root_url: str, request: PatchRequest, resource: str) -> str:
        """Return the download URL of a single resource."""
        return cls.base_url(root_url, request) + resource
