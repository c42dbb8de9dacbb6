import logging
import threading
from typing import Any, Callable, Optional, Type

from default_vpc_nuke_modules.aws_resource import (
    AWSResource,
    InternetGateway,
    NetworkAcl,
    RouteTable,
    SecurityGroup,
    Subnet,
    Vpc,
)
from default_vpc_nuke_modules.exceptions import CleanupCancelled
from default_vpc_nuke_modules.resource_filters import (
    is_default_network_acl,
    is_default_security_group,
    is_main_route_table,
)

logger = logging.getLogger(__name__)


class VPCCleaner:
    """Tears down a VPC's dependent networking resources, then the VPC.

    Every remote call goes through ``gateway``. ``cancel_event`` is shared
    with the other region workers; once it is set the cleaner raises
    CleanupCancelled before its next remote call.
    """

    def __init__(self, gateway: Any, cancel_event: Optional[threading.Event] = None):
        self.gateway = gateway
        self.region = gateway.region
        self.cancel_event = cancel_event or threading.Event()

    def cleanup_vpc(self, vpc_id: str) -> None:
        self.cleanup_vpc_resources(vpc_id)
        logger.info(f"Deleting default VPC {vpc_id} in region {self.region}")
        self.delete_vpc(vpc_id)

    def cleanup_vpc_resources(self, vpc_id: str) -> None:
        cleanup_sequence = [
            self.cleanup_internet_gateways,
            self.cleanup_subnets,
            self.cleanup_route_tables,
            self.cleanup_network_acls,
            self.cleanup_security_groups,
        ]

        for cleanup_step in cleanup_sequence:
            self._check_cancelled()
            logger.debug(f"[{self.region}] Running {cleanup_step.__name__} for VPC {vpc_id}")
            cleanup_step(vpc_id)

    def delete_vpc(self, vpc_id: str) -> None:
        self._check_cancelled()
        Vpc(resource_id=vpc_id, vpc_id=vpc_id, gateway=self.gateway, is_default=True).delete()

    def cleanup_internet_gateways(self, vpc_id: str) -> None:
        self._delete_resources(InternetGateway, vpc_id)

    def cleanup_subnets(self, vpc_id: str) -> None:
        self._delete_resources(Subnet, vpc_id)

    def cleanup_route_tables(self, vpc_id: str) -> None:
        # The main route table goes away with the VPC itself
        self._delete_resources(RouteTable, vpc_id, skip=is_main_route_table)

    def cleanup_network_acls(self, vpc_id: str) -> None:
        self._delete_resources(NetworkAcl, vpc_id, skip=is_default_network_acl)

    def cleanup_security_groups(self, vpc_id: str) -> None:
        self._delete_resources(SecurityGroup, vpc_id, skip=is_default_security_group)

    def _delete_resources(
        self,
        resource_cls: Type[AWSResource],
        vpc_id: str,
        skip: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        # Listing errors propagate before anything of this kind is deleted
        descriptions = self.gateway.list_resources(resource_cls.kind, {resource_cls.vpc_filter: vpc_id})
        resources = [resource_cls.from_description(d, vpc_id, self.gateway) for d in descriptions]

        for resource in resources:
            if skip is not None and skip(resource):
                logger.debug(f"Skipping {resource.label}: {resource.resource_id}")
                continue
            self._check_cancelled()
            resource.delete()

    def _check_cancelled(self) -> None:
        if self.cancel_event.is_set():
            raise CleanupCancelled(f"cleanup in region {self.region} cancelled")
