from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging

from botocore.exceptions import BotoCoreError, ClientError

from default_vpc_nuke_modules.exceptions import ResourceCleanupError

logger = logging.getLogger(__name__)


@dataclass
class AWSResource:
    """Base class for VPC-scoped resources with a common deletion pattern.

    ``kind`` is the gateway key used for list/delete calls, ``label`` the
    human-readable name used in log lines and error messages, and
    ``vpc_filter`` the describe filter that scopes a listing to one VPC.
    """

    resource_id: str
    vpc_id: str
    gateway: Any

    kind = ""
    label = ""
    id_key = ""
    vpc_filter = "vpc-id"

    @classmethod
    def from_description(cls, description: Dict, vpc_id: str, gateway: Any) -> "AWSResource":
        return cls(resource_id=description[cls.id_key], vpc_id=vpc_id, gateway=gateway)

    def delete(self) -> None:
        """Template method for resource deletion"""
        self._pre_delete()
        try:
            self._perform_delete()
        except (ClientError, BotoCoreError) as e:
            raise ResourceCleanupError("delete", self.label, self.resource_id) from e
        logger.info(f"Deleted {self.label}: {self.resource_id}")

    def _pre_delete(self) -> None:
        pass

    def _perform_delete(self) -> None:
        self.gateway.delete_resource(self.kind, self.resource_id)


@dataclass
class Vpc(AWSResource):
    is_default: bool = False

    kind = "vpc"
    label = "VPC"
    id_key = "VpcId"

    @classmethod
    def from_description(cls, description: Dict, vpc_id: str, gateway: Any) -> "Vpc":
        return cls(
            resource_id=description["VpcId"],
            vpc_id=vpc_id,
            gateway=gateway,
            is_default=description.get("IsDefault", False),
        )


@dataclass
class Subnet(AWSResource):
    kind = "subnet"
    label = "subnet"
    id_key = "SubnetId"


@dataclass
class RouteTable(AWSResource):
    associations: List[Dict] = field(default_factory=list)

    kind = "route-table"
    label = "route table"
    id_key = "RouteTableId"

    @classmethod
    def from_description(cls, description: Dict, vpc_id: str, gateway: Any) -> "RouteTable":
        return cls(
            resource_id=description["RouteTableId"],
            vpc_id=vpc_id,
            gateway=gateway,
            associations=description.get("Associations", []),
        )


@dataclass
class InternetGateway(AWSResource):
    kind = "internet-gateway"
    label = "internet gateway"
    id_key = "InternetGatewayId"
    vpc_filter = "attachment.vpc-id"

    def _pre_delete(self) -> None:
        # An attached gateway cannot be deleted
        try:
            self.gateway.detach_internet_gateway(self.resource_id, self.vpc_id)
        except (ClientError, BotoCoreError) as e:
            raise ResourceCleanupError("detach", self.label, self.resource_id) from e
        logger.debug(f"Detached {self.label} {self.resource_id} from {self.vpc_id}")


@dataclass
class NetworkAcl(AWSResource):
    is_default: bool = False

    kind = "network-acl"
    label = "network ACL"
    id_key = "NetworkAclId"

    @classmethod
    def from_description(cls, description: Dict, vpc_id: str, gateway: Any) -> "NetworkAcl":
        return cls(
            resource_id=description["NetworkAclId"],
            vpc_id=vpc_id,
            gateway=gateway,
            is_default=description.get("IsDefault", False),
        )


@dataclass
class SecurityGroup(AWSResource):
    group_name: str = ""

    kind = "security-group"
    label = "security group"
    id_key = "GroupId"

    @classmethod
    def from_description(cls, description: Dict, vpc_id: str, gateway: Any) -> "SecurityGroup":
        return cls(
            resource_id=description["GroupId"],
            vpc_id=vpc_id,
            gateway=gateway,
            group_name=description.get("GroupName", ""),
        )
