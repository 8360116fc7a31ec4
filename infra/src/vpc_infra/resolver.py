"""Resolve a subnet by identifier or by name and map it into data source state."""

from __future__ import annotations

import logging

from vpc_infra.components.subnet import (
    ById,
    ByName,
    LookupKey,
    SubnetClient,
    SubnetRecord,
    TagClient,
    TagType,
)
from vpc_infra.errors import ApiError, SubnetLookupError, SubnetNotFoundError, TagFetchError
from vpc_infra.pagination import get_next
from vpc_infra.state import SubnetState

logger: logging.Logger = logging.getLogger(__name__)


def list_all_subnets(client: SubnetClient) -> list[SubnetRecord]:
    """Fetch every subnet visible to the client, following ``next`` links.

    Raises ``ApiError`` from the first failing page.
    """
    start: str | None = None
    records: list[SubnetRecord] = []
    while True:
        page = client.list_subnets(start=start)
        records.extend(page.subnets)
        start = get_next(page.next_href)
        logger.debug(
            "subnet_list_page_fetched",
            extra={"count": len(page.subnets), "has_next": bool(start)},
        )
        if not start:
            return records


def resolve_subnet(client: SubnetClient, key: LookupKey) -> SubnetRecord:
    """Return the subnet addressed by ``key``.

    A name lookup scans all pages and returns the first exact match in page
    order.

    Raises:
        SubnetLookupError: The point fetch or any list page failed.
        SubnetNotFoundError: No subnet carries the requested name.
    """
    if isinstance(key, ById):
        logger.debug("subnet_lookup_by_id", extra={"identifier": key.identifier})
        try:
            return client.get_subnet(key.identifier)
        except ApiError as err:
            raise SubnetLookupError.for_identifier(key.identifier, err) from err

    if isinstance(key, ByName):
        logger.debug("subnet_lookup_by_name", extra={"subnet_name": key.name})
        try:
            records = list_all_subnets(client)
        except ApiError as err:
            raise SubnetLookupError.for_name(key.name, err) from err
        for record in records:
            if record.name == key.name:
                return record
        raise SubnetNotFoundError(key.name)

    raise TypeError(f"Unsupported lookup key: {key!r}")


class SubnetResolver:
    """Reads one subnet into a ``SubnetState``.

    Tag lookups are best effort: a failure is logged, kept in
    ``SubnetState.warnings``, and leaves that tag set empty.
    """

    def __init__(
        self,
        client: SubnetClient,
        tag_client: TagClient,
        controller_url: str,
    ) -> None:
        self._client: SubnetClient = client
        self._tag_client: TagClient = tag_client
        self._controller_url: str = controller_url

    def read(self, key: LookupKey) -> SubnetState:
        """Resolve ``key`` and build the full state record."""
        record = resolve_subnet(self._client, key)
        warnings: list[TagFetchError] = []
        tags = self._fetch_tags(record, TagType.USER, warnings)
        access_tags = self._fetch_tags(record, TagType.ACCESS, warnings)
        logger.info(
            "subnet_resolved",
            extra={"identifier": record.id, "subnet_name": record.name, "warnings": len(warnings)},
        )
        return SubnetState.from_record(
            record,
            controller_url=self._controller_url,
            tags=tags,
            access_tags=access_tags,
            warnings=tuple(warnings),
        )

    def _fetch_tags(
        self,
        record: SubnetRecord,
        tag_type: TagType,
        warnings: list[TagFetchError],
    ) -> set[str]:
        try:
            return set(self._tag_client.get_tags(record.crn, tag_type))
        except ApiError as err:
            warning = TagFetchError(record.id, tag_type.value, err)
            logger.warning(
                "subnet_tag_fetch_failed",
                extra={"identifier": record.id, "tag_type": tag_type.value, "error": str(err)},
            )
            warnings.append(warning)
            return set()
