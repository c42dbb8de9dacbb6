import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

# kind -> (describe operation, delete operation, id parameter of the delete call)
RESOURCE_KINDS = {
    "vpc": ("describe_vpcs", "delete_vpc", "VpcId"),
    "subnet": ("describe_subnets", "delete_subnet", "SubnetId"),
    "route-table": ("describe_route_tables", "delete_route_table", "RouteTableId"),
    "internet-gateway": ("describe_internet_gateways", "delete_internet_gateway", "InternetGatewayId"),
    "network-acl": ("describe_network_acls", "delete_network_acl", "NetworkAclId"),
    "security-group": ("describe_security_groups", "delete_security_group", "GroupId"),
}


class EC2Gateway:
    """Region-scoped access to the EC2 calls the cleanup workflow needs"""

    def __init__(
        self,
        region: str,
        session: Optional[boto3.Session] = None,
        config: Optional[Config] = None,
        ec2_client: Any = None,
    ):
        self.region = region
        self.session = session or boto3.Session()
        self.config = config
        self.ec2_client = ec2_client or self.session.client("ec2", region_name=region, config=config)

    def for_region(self, region: str) -> "EC2Gateway":
        return EC2Gateway(region, session=self.session, config=self.config)

    def list_regions(self) -> List[str]:
        response = self.ec2_client.describe_regions()
        return [region["RegionName"] for region in response.get("Regions", [])]

    def list_resources(self, kind: str, filters: Optional[Dict[str, str]] = None) -> List[Dict]:
        operation = RESOURCE_KINDS[kind][0]
        kwargs = {}
        if filters:
            kwargs["Filters"] = [{"Name": name, "Values": [value]} for name, value in filters.items()]
        items = self.paginate(self.ec2_client, operation, **kwargs)
        logger.debug(f"[{self.region}] {operation} returned {len(items)} item(s)")
        return items

    def delete_resource(self, kind: str, resource_id: str) -> None:
        _, operation, id_param = RESOURCE_KINDS[kind]
        getattr(self.ec2_client, operation)(**{id_param: resource_id})

    def detach_internet_gateway(self, igw_id: str, vpc_id: str) -> None:
        self.ec2_client.detach_internet_gateway(InternetGatewayId=igw_id, VpcId=vpc_id)

    def paginate(self, client: Any, operation: str, **kwargs) -> List[Dict]:
        paginator = client.get_paginator(operation)
        items = []
        for page in paginator.paginate(**kwargs):
            items.extend(page.get(self._get_result_key(operation), []))
        return items

    @staticmethod
    def _get_result_key(operation: str) -> str:
        key_mapping = {
            "describe_vpcs": "Vpcs",
            "describe_subnets": "Subnets",
            "describe_route_tables": "RouteTables",
            "describe_internet_gateways": "InternetGateways",
            "describe_network_acls": "NetworkAcls",
            "describe_security_groups": "SecurityGroups",
        }
        return key_mapping.get(operation, "")
