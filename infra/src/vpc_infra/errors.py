"""Exceptions raised while resolving VPC subnets."""

from __future__ import annotations


class VpcInfraError(Exception):
    """Base exception for vpc_infra."""


class ApiError(VpcInfraError):
    """Raised by a remote API client when a request fails.

    Args:
        message: Human-readable failure description.
        status_code: HTTP status returned by the service, when known.
        response: Raw response body, kept for diagnostics.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code: int | None = status_code
        self.response: str | None = response


class SubnetLookupError(VpcInfraError, LookupError):
    """A point fetch or a list scan failed.

    Exactly one of ``identifier`` or ``name`` is set, naming the key that
    was being resolved.
    """

    def __init__(
        self,
        message: str,
        identifier: str | None = None,
        name: str | None = None,
        cause: BaseException | None = None,
        response: str | None = None,
    ) -> None:
        super().__init__(message)
        self.identifier: str | None = identifier
        self.name: str | None = name
        self.cause: BaseException | None = cause
        self.response: str | None = response

    @classmethod
    def for_identifier(cls, identifier: str, cause: ApiError) -> SubnetLookupError:
        return cls(
            f"Error Getting Subnet ({identifier}): {cause}\n{cause.response or ''}".rstrip(),
            identifier=identifier,
            cause=cause,
            response=cause.response,
        )

    @classmethod
    def for_name(cls, name: str, cause: ApiError) -> SubnetLookupError:
        return cls(
            f"Error Fetching subnets List {cause}\n{cause.response or ''}".rstrip(),
            name=name,
            cause=cause,
            response=cause.response,
        )


class SubnetNotFoundError(SubnetLookupError):
    """A name scan completed without a match."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No subnet found with name ({name})", name=name)


class TagFetchError(VpcInfraError):
    """Tag retrieval for a subnet failed. Never fatal to a read."""

    def __init__(self, subnet_id: str, tag_type: str, cause: BaseException) -> None:
        super().__init__(f"Error reading {tag_type} tags of subnet ({subnet_id}): {cause}")
        self.subnet_id: str = subnet_id
        self.tag_type: str = tag_type
        self.cause: BaseException = cause
